from importlib.metadata import PackageNotFoundError, version

try:
    version = version("CmdTemplate")
except PackageNotFoundError:
    version = "0.0.0"
