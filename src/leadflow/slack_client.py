import httpx
from typing import Dict, List, Optional
from tenacity import RetryError, retry, retry_if_exception_type, stop_after_attempt, wait_exponential
from .config import Config
from .errors import MessagingError
from .logger import get_logger
from .mapping import DUE_LABELS_BY_TIER, PRIORITY_LABELS, SOURCE_LABELS
from .models import CreatedTask, Lead
from .task_builder import calculate_task_priority, format_contact_date


def build_task_blocks(lead: Lead, task: CreatedTask, mention_ids: List[str]) -> List[Dict]:
    """Block Kit layout for a "new task assigned" post."""
    mentions = " ".join(f"<@{user_id}>" for user_id in mention_ids)
    priority = calculate_task_priority(lead.tier)
    blocks: List[Dict] = [
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": f"📋 *New Task Assigned*\n{mentions}".rstrip()},
        },
        {
            "type": "section",
            "fields": [
                {"type": "mrkdwn", "text": f"*Task:*\n{task.name}"},
                {"type": "mrkdwn", "text": f"*Priority:*\n{PRIORITY_LABELS[priority]}"},
                {"type": "mrkdwn", "text": f"*Due:*\n{DUE_LABELS_BY_TIER.get(lead.tier, 'TBD')}"},
                {"type": "mrkdwn", "text": f"*Lead Source:*\n{SOURCE_LABELS.get(lead.source, lead.source.value)}"},
            ],
        },
    ]

    contact_fields = []
    if lead.phone:
        contact_fields.append({"type": "mrkdwn", "text": f"*Phone:*\n{lead.phone}"})
    if lead.email:
        contact_fields.append({"type": "mrkdwn", "text": f"*Email:*\n{lead.email}"})
    if contact_fields:
        blocks.append({"type": "section", "fields": contact_fields})

    if lead.condition_text:
        blocks.append({"type": "section", "text": {"type": "mrkdwn", "text": f"*Condition:*\n{lead.condition_text}"}})

    if lead.last_engagement:
        summary = (
            f"📊 Engagement: {lead.emails_opened} opens, {lead.emails_clicked} clicks"
            f" | Last contact: {format_contact_date(lead.last_engagement)}"
        )
        blocks.append({"type": "context", "elements": [{"type": "mrkdwn", "text": summary}]})

    if task.url:
        blocks.append(
            {
                "type": "actions",
                "elements": [
                    {
                        "type": "button",
                        "text": {"type": "plain_text", "text": "View in ClickUp"},
                        "url": task.url,
                        "style": "primary",
                    }
                ],
            }
        )
    return blocks


class SlackMessenger:
    def __init__(self, cfg: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.cfg = cfg
        self.logger = get_logger(self.__class__.__name__, cfg.log_level)
        self.api = "https://slack.com/api"
        self.headers = {
            "Authorization": f"Bearer {cfg.slack_bot_token}",
            "Content-Type": "application/json; charset=utf-8",
        }
        self.transport = transport

    @retry(
        retry=retry_if_exception_type((httpx.TransportError, httpx.HTTPStatusError)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
    )
    async def _post(self, method: str, payload: Dict) -> Dict:
        async with httpx.AsyncClient(
            base_url=self.api,
            headers=self.headers,
            timeout=self.cfg.http_timeout_seconds,
            transport=self.transport,
        ) as client:
            r = await client.post(f"/{method}", json=payload)
        if r.status_code == 429 or r.status_code >= 500:
            self.logger.error(f"Slack {method} error {r.status_code}: {r.text}")
            raise httpx.HTTPStatusError(f"Slack {method} failed", request=r.request, response=r)
        if r.status_code != 200:
            self.logger.error(f"Slack {method} error {r.status_code}: {r.text}")
            raise MessagingError(f"Slack {method} failed ({r.status_code})", status_code=r.status_code)
        data = r.json()
        if not data.get("ok"):
            error = data.get("error", "unknown_error")
            if error in ("not_in_channel", "channel_not_found"):
                self.logger.error(f"Slack {error}: invite the bot to channel {payload.get('channel')}.")
            raise MessagingError(f"Slack API error: {error}")
        return data

    async def post_message(self, channel_id: str, blocks: List[Dict], text: str = "") -> Dict:
        payload = {"channel": channel_id, "blocks": blocks, "text": text}
        try:
            return await self._post("chat.postMessage", payload)
        except RetryError as re:
            last_exc = re.last_attempt.exception()
            raise MessagingError(f"Slack chat.postMessage failed after retries: {last_exc}") from last_exc

    async def notify_task_created(
        self,
        lead: Lead,
        task: CreatedTask,
        mention_ids: List[str],
        channel_id: str,
    ) -> None:
        blocks = build_task_blocks(lead, task, mention_ids)
        await self.post_message(channel_id, blocks, text=f"New task: {task.name}")
