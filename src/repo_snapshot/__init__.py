from importlib.metadata import PackageNotFoundError, version as pkg_version

try:
    __version__ = pkg_version("repo-snapshot-service")
except PackageNotFoundError:
    __version__ = "0.0.0"
