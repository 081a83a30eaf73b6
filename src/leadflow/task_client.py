import httpx
from typing import Dict, Optional
from tenacity import RetryError, retry, retry_if_exception_type, stop_after_attempt, wait_exponential
from .config import Config
from .errors import StoreError
from .logger import get_logger
from .mapping import CLICKUP_PRIORITY_VALUES
from .models import CreatedTask, Task


class ClickUpTaskClient:
    def __init__(self, cfg: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.cfg = cfg
        self.logger = get_logger(self.__class__.__name__, cfg.log_level)
        self.api = "https://api.clickup.com/api/v2"
        self.headers = {
            "Authorization": cfg.clickup_api_token,
            "Content-Type": "application/json",
        }
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.api,
            headers=self.headers,
            timeout=self.cfg.http_timeout_seconds,
            transport=self.transport,
        )

    def build_payload(self, task: Task) -> Dict:
        payload = {
            "name": task.name,
            "markdown_description": task.description,
            "assignees": [_as_user_id(a) for a in task.assignees],
            "priority": CLICKUP_PRIORITY_VALUES.get(task.priority, 3),
            "status": task.status.value,
            "tags": list(task.tags),
        }
        if task.due_date is not None:
            payload["due_date"] = int(task.due_date.timestamp() * 1000)
            payload["due_date_time"] = True
        return payload

    @retry(
        retry=retry_if_exception_type((httpx.TransportError, httpx.HTTPStatusError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
    )
    async def _post_task(self, list_id: str, payload: Dict) -> Dict:
        async with self._client() as client:
            r = await client.post(f"/list/{list_id}/task", json=payload)
        if r.status_code >= 500:
            self.logger.error(f"ClickUp create task error {r.status_code}: {r.text}")
            raise httpx.HTTPStatusError("ClickUp create task failed", request=r.request, response=r)
        if r.status_code != 200:
            body = r.text
            if r.status_code == 401:
                self.logger.error("ClickUp 401: invalid API token.")
            elif r.status_code == 404:
                self.logger.error(f"ClickUp 404: list {list_id} not found or not visible to this token.")
            else:
                self.logger.error(f"ClickUp create task error {r.status_code}: {body}")
            raise StoreError(f"ClickUp create task failed ({r.status_code}): {body}", status_code=r.status_code)
        return r.json()

    async def create_task(self, task: Task) -> CreatedTask:
        try:
            data = await self._post_task(task.list_id, self.build_payload(task))
        except RetryError as re:
            last_exc = re.last_attempt.exception()
            raise StoreError(f"ClickUp create task failed after retries: {last_exc}") from last_exc
        return CreatedTask(id=data["id"], name=data.get("name") or task.name, url=data.get("url") or "")


def _as_user_id(value: str):
    # ClickUp user ids are numeric; keep anything else untouched.
    return int(value) if value.isdigit() else value
