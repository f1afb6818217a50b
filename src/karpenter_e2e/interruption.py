from __future__ import annotations

from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from .clients import get_sqs_client
from .config import AWSConfig
from .errors import QueueLookupError
from .logger import logger
from .settings import EnvironmentSettings


class SQSProvider:
    """
    Thin handle on the interruption queue Karpenter consumes.

    Tests use it to inject interruption events and to drain the queue.
    """

    def __init__(self, client: Any, url: str):
        self.client = client
        self.url = url

    @property
    def name(self) -> str:
        return self.url.rstrip("/").split("/")[-1]

    def get_messages(self) -> list[dict[str, Any]]:
        out = self.client.receive_message(
            QueueUrl=self.url,
            MaxNumberOfMessages=10,
            VisibilityTimeout=20,
            WaitTimeSeconds=20,
            AttributeNames=["SentTimestamp"],
            MessageAttributeNames=["All"],
        )
        return list(out.get("Messages", []))

    def send_message(self, body: str) -> str:
        out = self.client.send_message(QueueUrl=self.url, MessageBody=body)
        return str(out.get("MessageId", ""))

    def delete_message(self, message: dict[str, Any]) -> None:
        self.client.delete_message(
            QueueUrl=self.url, ReceiptHandle=message["ReceiptHandle"]
        )


def get_interruption_queue(
    settings: EnvironmentSettings, cfg: AWSConfig
) -> SQSProvider | None:
    """
    Resolves INTERRUPTION_QUEUE to a provider, or None when it is unset.

    A queue that was asked for but cannot be found is a misconfigured run,
    so lookup failures raise QueueLookupError.
    """
    if settings.interruption_queue is None:
        logger.debug("Interruption queue not configured; interruption tests unavailable")
        return None

    sqs = get_sqs_client(cfg)
    try:
        out = sqs.get_queue_url(QueueName=settings.interruption_queue)
    except ClientError as e:
        raise QueueLookupError(
            settings.interruption_queue, e.response.get("Error", {}).get("Code", str(e))
        ) from e
    except BotoCoreError as e:
        raise QueueLookupError(settings.interruption_queue, str(e)) from e

    url = out.get("QueueUrl")
    if not url:
        raise QueueLookupError(settings.interruption_queue, "no queue URL returned")
    logger.info(f"Using interruption queue {url}")
    return SQSProvider(sqs, url)
