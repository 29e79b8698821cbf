#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
pi_monitor.asgi
~~~~~~~~~~~~~~~
the pi-monitor web application

run this from uvicorn or gunicorn
"""

import os

from pi_monitor.app import create_app

debug = os.getenv("PI_MONITOR_DEBUG", "False").lower() == "true"

app = create_app(debug=debug)
