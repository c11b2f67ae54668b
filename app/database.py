from ibmcloudant.cloudant_v1 import CloudantV1
from ibm_cloud_sdk_core import ApiException
from ibm_cloud_sdk_core.authenticators import IAMAuthenticator

from app.config import settings

_client: CloudantV1 | None = None


def get_cloudant() -> CloudantV1:
    global _client
    if _client is None:
        if not settings.cloudant_url or not settings.cloudant_apikey:
            raise RuntimeError("Set CLOUDANT_URL and CLOUDANT_APIKEY in .env")
        authenticator = IAMAuthenticator(settings.cloudant_apikey)
        _client = CloudantV1(authenticator=authenticator)
        _client.set_service_url(settings.cloudant_url)
        _client.set_http_config({"timeout": settings.cloudant_timeout})
    return _client


def ensure_database(client, db_name: str) -> bool:
    """Create a database if it doesn't already exist. Returns True when created."""
    try:
        client.put_database(db=db_name).get_result()
        return True
    except ApiException as e:
        if e.code == 412 or "file_exists" in str(e).lower():
            return False
        raise
