

class PatentBrowserError(Exception):
    """Base exception for all patent_browser errors"""
    pass

class ConfigError(PatentBrowserError):
    """Invalid or inconsistent global.json / dataset config"""
    pass

class DatasetLoadError(PatentBrowserError):
    """
    One of the configured CSV extracts could not be read.
    The store is never built from a partial set of datasets.
    """
    pass

class DatasetSchemaError(PatentBrowserError):
    """A dataset config names a kind the pipeline does not know about"""
    pass
