#  ___  _                          _  _
# | _ \(_) ___  _ __   ___  _ _  (_)| |_  ___  _ _
# |  _/| ||___|| '  \ / _ \| ' \ | ||  _|/ _ \| '_|
# |_|  |_|     |_|_|_|\___/|_||_||_| \__|\___/|_|

__title__ = "pi_monitor"
__description__ = "host telemetry over HTTP for single-board computers and Linux hosts"
__url__ = "https://github.com/pi-monitor/pi-monitor"
__author__ = "pi-monitor contributors"
__author_email__ = "maintainers@pi-monitor.dev"
__version__ = "1.0.0"
__status__ = "beta"
__license__ = "BSD-3-Clause"
__license_url__ = "https://opensource.org/licenses/BSD-3-Clause"
