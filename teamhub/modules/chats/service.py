from supabase import Client
from teamhub.modules.chats.schemas import (
    DirectChatCreate, GroupChatCreate, CounterpartProfile,
    DirectChatResponse, GroupChatResponse, ChatListResponse
)
from teamhub.modules.users.service import UserService
from teamhub.core.exceptions import TeamhubError, ValidationError, StorageError
from teamhub.core.identity import canonical_pair, derive_direct_id, generate_id
from teamhub.database.queries import first_row, merge_rows, newest_first, where_member
from typing import Dict, List, Optional
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

DEFAULT_GROUP_ICON = "🎮"
CHAT_KINDS = {"dm": "dm", "direct": "dm", "group": "group"}


def _counterpart(user_id: str, profile: Optional[Dict]) -> CounterpartProfile:
    profile = profile or {}
    return CounterpartProfile(
        id=user_id,
        name=profile.get("name") or "Unknown",
        avatar=profile.get("avatar") or "?",
        status=profile.get("status") or "offline",
    )


class ChatService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.users = UserService(supabase)

    def list_chats(self, user_id: str, kind: Optional[str] = None) -> ChatListResponse:
        """Direct chats (with counterpart profile) and groups the user created or belongs to"""
        if not user_id:
            raise ValidationError("user_id is required")
        if kind is not None and kind not in CHAT_KINDS:
            raise ValidationError(f"Unknown chat kind: {kind}")
        kind = CHAT_KINDS.get(kind) if kind else None

        try:
            response = ChatListResponse()
            if kind in (None, "dm"):
                response.dms = self._list_direct(user_id)
            if kind in (None, "group"):
                response.groups = self._list_groups(user_id)
            return response
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Listing chats for %s failed", user_id)
            raise StorageError(str(e))

    def _list_direct(self, user_id: str) -> List[DirectChatResponse]:
        table = self.supabase.table("dm_chats")
        as_first = table.select("*").eq("user1_id", user_id).execute()
        as_second = table.select("*").eq("user2_id", user_id).execute()
        rows = newest_first(merge_rows(as_first.data, as_second.data))

        other_ids = [r["user2_id"] if r["user1_id"] == user_id else r["user1_id"] for r in rows]
        profiles = self.users.get_public_profiles(other_ids)

        chats = []
        for row, other_id in zip(rows, other_ids):
            other = _counterpart(other_id, profiles.get(other_id))
            chats.append(DirectChatResponse(
                id=row["id"],
                name=other.name,
                other_user=other,
                created_at=row["created_at"],
            ))
        return chats

    def _list_groups(self, user_id: str) -> List[GroupChatResponse]:
        table = self.supabase.table("group_chats")
        created = table.select("*").eq("creator_id", user_id).execute()
        joined = where_member(table.select("*"), "members", user_id).execute()
        rows = newest_first(merge_rows(created.data, joined.data))
        return [GroupChatResponse(**row) for row in rows]

    def create_direct(self, chat_data: DirectChatCreate) -> DirectChatResponse:
        """Create the direct chat for a pair of users, or return the existing one"""
        if not chat_data.user_id or not chat_data.friend_id:
            raise ValidationError("user_id and friend_id are required")
        if chat_data.user_id == chat_data.friend_id:
            raise ValidationError("Cannot start a direct chat with yourself")

        chat_id = derive_direct_id(chat_data.user_id, chat_data.friend_id)
        user1_id, user2_id = canonical_pair(chat_data.user_id, chat_data.friend_id)
        now = datetime.now(timezone.utc).isoformat()

        try:
            # Insert-if-absent: a concurrent duplicate resolves to the same row
            inserted = self.supabase.table("dm_chats").upsert({
                "id": chat_id,
                "user1_id": user1_id,
                "user2_id": user2_id,
                "created_at": now,
            }, on_conflict="id", ignore_duplicates=True).execute()

            row = first_row(inserted)
            if row is None:
                existing = self.supabase.table("dm_chats").select("*").eq("id", chat_id).limit(1).execute()
                row = first_row(existing) or {"created_at": now}
            else:
                logger.info("Created direct chat %s", chat_id)

            profiles = self.users.get_public_profiles([chat_data.friend_id])
            other = _counterpart(chat_data.friend_id, profiles.get(chat_data.friend_id))
            return DirectChatResponse(
                id=chat_id,
                name=other.name,
                other_user=other,
                created_at=row["created_at"],
            )
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Creating direct chat %s failed", chat_id)
            raise StorageError(str(e))

    def create_group(self, group_data: GroupChatCreate) -> GroupChatResponse:
        """Create a group chat"""
        if not group_data.name or not group_data.name.strip():
            raise ValidationError("name is required")

        try:
            result = self.supabase.table("group_chats").insert({
                "id": generate_id("group"),
                "name": group_data.name,
                "icon": group_data.icon or DEFAULT_GROUP_ICON,
                "description": group_data.description or "",
                "creator_id": group_data.creator_id or None,
                "members": group_data.members or [],
                "created_at": datetime.now(timezone.utc).isoformat(),
            }).execute()

            if not result.data:
                raise StorageError("Failed to create group chat")

            logger.info("Created group chat %s", result.data[0]["id"])
            return GroupChatResponse(**result.data[0])
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Creating group chat failed")
            raise StorageError(str(e))
