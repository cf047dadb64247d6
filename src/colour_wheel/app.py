from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .gamut import rgb_to_clamped_hex
from .models import (
    ALL_MODELS,
    ColourModel,
    ColourOnGradient,
    get_model_defaults,
    get_model_from_code,
    resolve_scaling,
)
from .scaling import ScaleOverrides
from .spaces import lab_to_rgb
from .wheel import generate_wheel, swatch_position

log = logging.getLogger(__name__)

DEFAULT_CONFIG: Mapping[str, Any] = {
    "DEFAULT_MODEL": "HSL",
    "WHEEL_RINGS": 10,
    "WHEEL_SLICES": 60,
    "MAX_RINGS": 20,
    "MAX_SLICES": 120,
}

_SCALE_ARGS = {"aMin": "a_min", "aMax": "a_max", "bMin": "b_min", "bMax": "b_max"}


def parse_float(val: str | None) -> float | None:
    if val is None or not val.strip():
        return None
    try:
        number = float(val)
    except ValueError:
        raise ValueError(f"not a number: {val!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {val!r}")
    return number


def parse_int(val: str | None, default: int, lo: int, hi: int, name: str) -> int:
    if val is None or not val.strip():
        return default
    try:
        n = int(val)
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None
    if not lo <= n <= hi:
        raise ValueError(f"{name} must be between {lo} and {hi}")
    return n


def parse_lab(val: str | None) -> tuple[float, float, float]:
    """'L,a,b' → floats."""
    parts = [p for p in (val or "").replace(" ", ",").split(",") if p]
    if len(parts) != 3:
        raise ValueError("lab must be three comma-separated numbers")
    try:
        L, a, b = (float(p) for p in parts)
    except ValueError:
        raise ValueError("lab must be three comma-separated numbers") from None
    return L, a, b


def parse_overrides(args: Mapping[str, str]) -> ScaleOverrides:
    return ScaleOverrides(
        **{field: parse_float(args.get(arg)) for arg, field in _SCALE_ARGS.items()}
    )


def model_summary(model: ColourModel) -> dict[str, Any]:
    return {
        "code": model.code,
        "name": model.name,
        "description": model.description,
        "aLabel": model.a_label,
        "bLabel": model.b_label,
        "defaults": get_model_defaults(model).as_dict(),
        "angleGradient": model.has_angle_gradient,
    }


def gradient_summary(gradient: ColourOnGradient) -> dict[str, Any]:
    return {
        "stops": gradient.stops(),
        "position": gradient.position,
        "extent": gradient.extent,
    }


# ----------------------------- Flask app ----------------------------------


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    if config:
        app.config.from_mapping(config)
    app.config.from_prefixed_env("COLOUR_WHEEL")
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    def pick_model(code: str | None) -> ColourModel:
        fallback = app.config["DEFAULT_MODEL"]
        model = get_model_from_code(code or fallback)
        if model is None:
            log.warning("Unknown colour model %r, using %s", code, fallback)
            model = get_model_from_code(fallback) or ALL_MODELS[0]
        return model

    @app.errorhandler(ValueError)
    def bad_request(exc: ValueError):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def server_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Request failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/models")
    def models():
        return jsonify([model_summary(m) for m in ALL_MODELS])

    @app.route("/wheel")
    def wheel():
        model = pick_model(request.args.get("model"))
        rings = parse_int(
            request.args.get("rings"),
            app.config["WHEEL_RINGS"],
            1,
            app.config["MAX_RINGS"],
            "rings",
        )
        slices = parse_int(
            request.args.get("slices"),
            app.config["WHEEL_SLICES"],
            1,
            app.config["MAX_SLICES"],
            "slices",
        )
        scaling = resolve_scaling(model, parse_overrides(request.args))
        cells = generate_wheel(model, scaling, rings=rings, slices=slices)
        return jsonify(
            {
                "model": model.code,
                "rings": rings,
                "slices": slices,
                "scaling": scaling.as_dict(),
                "cells": [c.as_dict() for c in cells],
            }
        )

    @app.route("/locate")
    def locate():
        model = pick_model(request.args.get("model"))
        lab = parse_lab(request.args.get("lab"))
        scaling = resolve_scaling(model, parse_overrides(request.args))
        location = model.locate_lab(lab, scaling)
        placement = swatch_position(location)

        gradients = {
            "a": gradient_summary(model.a_gradient(location.in_model)),
            "b": gradient_summary(model.b_gradient(location.in_model)),
        }
        if model.angle_gradient is not None:
            gradients["angle"] = gradient_summary(model.angle_gradient(location.in_model))

        return jsonify(
            {
                "model": model.code,
                "scaling": scaling.as_dict(),
                "colour": rgb_to_clamped_hex(lab_to_rgb(lab)),
                "location": location.as_dict(),
                "placement": {
                    "x": placement.x,
                    "y": placement.y,
                    "marker": placement.marker,
                },
                "gradients": gradients,
            }
        )

    return app


__all__ = ["DEFAULT_CONFIG", "create_app", "parse_lab", "parse_overrides"]
