"""
Read-only client for the Knative serving API.
Fetches a single service and lists revisions; nothing here writes to the cluster.
"""

import logging
from typing import Any, Dict, Optional

import requests

from serving_spec.constants import SERVING_API_VERSION, SERVICE_LABEL_KEY
from serving_spec.models import Service, RevisionList, parse_service, parse_revision_list
from .config import Settings
from .errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

def with_service(name: str) -> str:
    """List filter selecting the revisions that belong to a service."""
    return f"{SERVICE_LABEL_KEY}={name}"

class ServingClient:
    def __init__(self, settings: Settings, namespace: Optional[str] = None,
                 session: Optional[requests.Session] = None):
        self.settings = settings
        self.namespace = namespace or settings.namespace
        self.base_url = f"{settings.server.rstrip('/')}/apis/{SERVING_API_VERSION}/namespaces/{self.namespace}"
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        if settings.token:
            self.session.headers.update({"Authorization": f"Bearer {settings.token}"})

    def _get(self, path: str, params: Optional[Dict[str, str]] = None,
             not_found: Optional[str] = None) -> Dict[str, Any]:
        url = f"{self.base_url}/{path}"
        try:
            response = self.session.get(
                url,
                params=params,
                timeout=self.settings.timeout,
                verify=self.settings.verify,
            )
        except requests.exceptions.Timeout as e:
            raise UpstreamError(f"Timed out talking to {self.settings.server}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise UpstreamError(f"Unable to connect to {self.settings.server}: {e}") from e

        if response.status_code == 404 and not_found:
            raise NotFoundError(not_found)
        if response.status_code != 200:
            raise UpstreamError(
                f"GET {url} failed with {response.status_code}: {_error_message(response)}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"GET {url} returned invalid JSON: {e}") from e

    def get_service(self, name: str) -> Service:
        """Fetch a service by name from the client's namespace."""
        logger.info(f"Fetching service {name} in namespace {self.namespace}")
        data = self._get(
            f"services/{name}",
            not_found=f'services.serving.knative.dev "{name}" not found',
        )
        try:
            return parse_service(data)
        except ValueError as e:
            raise UpstreamError(str(e)) from e

    def list_revisions(self, *filters: str) -> RevisionList:
        """List revisions, narrowed by label selector filters such as with_service()."""
        params = {}
        if filters:
            params["labelSelector"] = ",".join(filters)
        logger.info(f"Listing revisions in namespace {self.namespace} ({params.get('labelSelector', 'all')})")
        data = self._get("revisions", params=params)
        try:
            return parse_revision_list(data)
        except ValueError as e:
            raise UpstreamError(str(e)) from e

def _error_message(response: requests.Response) -> str:
    """Best effort extraction of a Kubernetes Status message."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or ""
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return str(body)
