from .response_wrappers import CamelModel, DataResponse, Pagination

__all__ = ["CamelModel", "DataResponse", "Pagination"]
