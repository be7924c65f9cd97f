# timeflow/utils/errors.py
class ConfigError(RuntimeError):
    """
    Raised for invalid user-provided config (missing file, unknown clock kind).
    Should NOT print traceback.
    """
