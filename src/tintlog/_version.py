from importlib.metadata import PackageNotFoundError, version


def tintlog_version() -> str:
    try:
        return version("tintlog")
    except PackageNotFoundError:  # pragma: nocover
        return "UNKNOWN"
