from .frankfurter import FrankfurterClient, UpstreamError, frankfurter_client

__all__ = ["FrankfurterClient", "UpstreamError", "frankfurter_client"]
