from .errors import LoaderError
from .parameter_loader import load_message_catalog, load_parameters

__all__ = ["load_parameters", "load_message_catalog", "LoaderError"]
