import requests
import logging
from typing import Any, Dict, List, Optional

from ..schemas import JobApplication, JobDraft
from .table_client import JobsTable, RemoteOperationError, draft_payload, parse_rows

logger = logging.getLogger(__name__)


class RestJobsTable(JobsTable):
    """
    Jobs table exposed by a hosted backend-as-a-service over its REST interface
    (PostgREST query dialect: `select=*`, `order=created_at.desc`, `id=eq.<id>`).
    """

    def __init__(self, table_url: str, api_key: str, timeout: int = 10,
                 session: Optional[requests.Session] = None):
        self.table_url = table_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'apikey': api_key,
            'Authorization': f'Bearer {api_key}',
            'Content-Type': 'application/json',
        })

    def _request(self, method: str, params: Dict[str, str], payload: Any = None,
                 return_rows: bool = False) -> Any:
        headers = {'Prefer': 'return=representation'} if return_rows else {}
        try:
            response = self.session.request(
                method,
                self.table_url,
                params=params,
                json=payload,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("%s %s failed: %s", method, self.table_url, str(e))
            raise RemoteOperationError(str(e)) from e

        if not response.ok:
            message = self._error_message(response)
            logger.error("%s %s returned %s: %s", method, self.table_url, response.status_code, message)
            raise RemoteOperationError(message)

        if not return_rows:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RemoteOperationError(f"Invalid JSON from remote table: {e}") from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get('message'):
            return body['message']
        return response.text or f"HTTP {response.status_code}"

    def select_all(self) -> List[JobApplication]:
        rows = self._request('GET', {'select': '*', 'order': 'created_at.desc'}, return_rows=True)
        return parse_rows(rows or [])

    def insert(self, draft: JobDraft) -> JobApplication:
        rows = self._request('POST', {'select': '*'}, payload=[draft_payload(draft)], return_rows=True)
        if not rows:
            raise RemoteOperationError("Insert returned no rows")
        return parse_rows(rows)[0]

    def update(self, job_id: int, draft: JobDraft) -> None:
        self._request('PATCH', {'id': f'eq.{job_id}'}, payload=draft_payload(draft))

    def delete(self, job_id: int) -> None:
        self._request('DELETE', {'id': f'eq.{job_id}'})
