"""Colour wheel JSON service (Flask).

Serves the colour-model engine from ``colour_wheel``: sampled wheels for
any of the catalog models and the location of a CIELAB colour on them.

Usage
-----
$ pip install -e .
$ python main.py                 # starts on http://127.0.0.1:5000

Endpoints
---------
/models                          catalog with per-model scaling defaults
/wheel?model=JCh&rings=10&slices=60&aMin=20&aMax=80
/locate?model=HSL&lab=53.2,80.1,67.2

Settings can be overridden with COLOUR_WHEEL_* environment variables,
e.g. COLOUR_WHEEL_DEFAULT_MODEL='"JCh"' (values are parsed as JSON).
"""

from __future__ import annotations

from colour_wheel.app import create_app

if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
