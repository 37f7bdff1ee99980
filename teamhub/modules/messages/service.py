from supabase import Client
from teamhub.modules.messages.schemas import (
    MessageCreate, MessageSeed, MessageResponse, ReplyRef, MessageReplaceResponse
)
from teamhub.core.exceptions import TeamhubError, ValidationError, StorageError
from teamhub.config.settings import settings
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
from zoneinfo import ZoneInfo
import logging

logger = logging.getLogger(__name__)


def _parse_timestamp(value: Any) -> datetime:
    ts = value if isinstance(value, datetime) else datetime.fromisoformat(str(value))
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def to_message_view(row: Dict[str, Any]) -> MessageResponse:
    """Materialize a stored row into the client view with display time/date fields"""
    ts = _parse_timestamp(row["timestamp"])
    local = ts.astimezone(ZoneInfo(settings.display_timezone))
    sender_name = row.get("sender_name") or "Unknown"
    return MessageResponse(
        id=str(row["id"]),
        chat_id=row["chat_id"],
        user_id=row.get("sender_id") or "unknown",
        user_name=sender_name,
        avatar=sender_name[0],
        content=row.get("content") or "",
        created_at=ts,
        timestamp=local.strftime("%H:%M"),
        date=f"{local.year}年{local.month}月{local.day}日",
        reactions=row.get("reactions") or [],
        reply_to=ReplyRef(id=str(row["reply_to"])) if row.get("reply_to") else None,
        is_edited=bool(row.get("is_edited")),
    )


class MessageService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def list_messages(self, chat_id: str, after: Optional[str] = None) -> List[MessageResponse]:
        """
        Messages of a chat, oldest first.

        Without ``after`` only the most recent ``message_history_limit``
        messages are returned. With ``after`` (a message id) every message
        with a greater id is returned; clients poll with the greatest id
        they have seen.
        """
        if not chat_id:
            raise ValidationError("chat_id is required")

        after_id = None
        if after not in (None, ""):
            try:
                after_id = int(after)
            except (TypeError, ValueError):
                raise ValidationError(f"after must be a message id, got {after!r}")

        try:
            query = self.supabase.table("messages").select("*").eq("chat_id", chat_id)
            if after_id is not None:
                result = query.gt("id", after_id).order("id").execute()
                rows = result.data
            else:
                result = query.order("timestamp", desc=True)\
                    .order("id", desc=True)\
                    .limit(settings.message_history_limit)\
                    .execute()
                rows = list(reversed(result.data))
            return [to_message_view(row) for row in rows]
        except Exception as e:
            logger.exception("Listing messages of %s failed", chat_id)
            raise StorageError(str(e))

    def send_message(self, message_data: MessageCreate) -> MessageResponse:
        """Append a message; the store assigns the id"""
        missing = [
            field for field in ("chat_id", "sender_id", "sender_name", "content")
            if not getattr(message_data, field)
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        try:
            result = self.supabase.table("messages").insert({
                "chat_id": message_data.chat_id,
                "sender_id": message_data.sender_id,
                "sender_name": message_data.sender_name,
                "content": message_data.content,
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "reply_to": message_data.reply_to,
                "reactions": [],
                "is_edited": False,
            }).execute()

            if not result.data:
                raise StorageError("Failed to store message")

            return to_message_view(result.data[0])
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Sending message to %s failed", message_data.chat_id)
            raise StorageError(str(e))

    def replace_messages(self, chat_id: str, messages: List[MessageSeed]) -> MessageReplaceResponse:
        """
        Replace the whole history of a chat.

        Deletes every stored message of the chat, then inserts ``messages``
        in order. The two steps are not atomic: a failure part way leaves
        the history partial (re-query before trusting it). Deleted rows are
        not restored.

        Inserted messages get new ids, so reply references cannot survive
        the reseed: any ``reply_to`` sent with a seed is dropped and every
        reseeded message has ``reply_to`` null.
        """
        if not chat_id:
            raise ValidationError("chat_id is required")

        try:
            deleted = self.supabase.table("messages").delete().eq("chat_id", chat_id).execute()
        except Exception as e:
            logger.exception("Clearing messages of %s failed", chat_id)
            raise StorageError(str(e))

        inserted = 0
        for seed in messages:
            try:
                self.supabase.table("messages").insert({
                    "chat_id": chat_id,
                    "sender_id": seed.sender_id or "unknown",
                    "sender_name": seed.sender_name or "Unknown",
                    "content": seed.content,
                    "timestamp": _parse_timestamp(seed.timestamp or datetime.now(timezone.utc)).isoformat(),
                    "reactions": seed.reactions or [],
                    "is_edited": seed.is_edited,
                }).execute()
            except Exception as e:
                logger.error(
                    "Replacing messages of %s stopped after %d of %d inserts: %s",
                    chat_id, inserted, len(messages), e
                )
                raise StorageError(
                    f"History of {chat_id} is partial ({inserted} of {len(messages)} messages written): {e}"
                )
            inserted += 1

        logger.info("Replaced history of %s with %d messages", chat_id, inserted)
        return MessageReplaceResponse(chat_id=chat_id, deleted=len(deleted.data or []), inserted=inserted)
