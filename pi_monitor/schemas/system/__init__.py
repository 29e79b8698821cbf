from .system import HostSpecs
