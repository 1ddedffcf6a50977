from cssrefactor.optimize.minifier import MinifyResult, minify

__all__ = ["MinifyResult", "minify"]
