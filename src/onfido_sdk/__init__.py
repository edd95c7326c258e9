"""
onfido_sdk – Python client for the Onfido identity-verification API.

Import path convention::

    from onfido_sdk import Client, Region
    from onfido_sdk.kernel.errors import ApiError, NotFoundError, ValidationError
    from onfido_sdk.application.pagination import WithPage, WithPageLimit
    from onfido_sdk.resources import ApplicantPayload, DocumentUpload
"""

from onfido_sdk.client import CLIENT_VERSION, Client, Region
from onfido_sdk.resilience.deadline import Context

__version__ = CLIENT_VERSION
__all__ = ["Client", "Context", "Region", "__version__"]
