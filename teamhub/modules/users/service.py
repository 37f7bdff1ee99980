from supabase import Client
from teamhub.modules.users.schemas import (
    UserRegister, UserResponse, UserPublicResponse, UserRegisterResponse
)
from teamhub.core.exceptions import TeamhubError, ValidationError, NotFoundError, StorageError
from teamhub.core.identity import generate_id
from teamhub.database.queries import escape_like, first_row, merge_rows
from typing import Dict, List, Optional
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

PUBLIC_COLUMNS = "id, name, avatar, status, provider"


class UserService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    def _find_by_provider(self, provider: str, provider_id: str) -> Optional[Dict]:
        result = self.supabase.table("users")\
            .select("*")\
            .eq("provider", provider)\
            .eq("provider_id", provider_id)\
            .limit(1)\
            .execute()
        return first_row(result)

    def _find_by_name(self, name: str, provider: str) -> Optional[Dict]:
        # ilike narrows the candidates; PostgREST reads "*" as a wildcard, so confirm here
        result = self.supabase.table("users")\
            .select("*")\
            .eq("provider", provider)\
            .ilike("name", escape_like(name))\
            .order("created_at")\
            .execute()
        wanted = name.lower()
        return next((u for u in result.data or [] if (u.get("name") or "").lower() == wanted), None)

    def register_or_login(self, user_data: UserRegister) -> UserRegisterResponse:
        """Return the matching user (provider id first, then name) or create a new one"""
        name = (user_data.name or "").strip()
        if not name:
            raise ValidationError("Name is required")
        provider = user_data.provider or "email"

        try:
            now = datetime.now(timezone.utc).isoformat()
            existing = None
            if provider != "email" and user_data.provider_id:
                existing = self._find_by_provider(provider, user_data.provider_id)
            if existing is None:
                existing = self._find_by_name(name, provider)

            if existing:
                result = self.supabase.table("users")\
                    .update({"last_login_at": now})\
                    .eq("id", existing["id"])\
                    .execute()
                user = first_row(result) or {**existing, "last_login_at": now}
                logger.info("User %s logged in", user["id"])
                return UserRegisterResponse(user=UserResponse(**user), is_new=False)

            result = self.supabase.table("users").insert({
                "id": generate_id("user"),
                "name": name,
                "email": user_data.email,
                "avatar": name[0].upper(),
                "status": "offline",
                "provider": provider,
                "provider_id": user_data.provider_id,
                "created_at": now,
                "last_login_at": now,
            }).execute()

            if not result.data:
                raise StorageError("Failed to create user")

            logger.info("Registered user %s", result.data[0]["id"])
            return UserRegisterResponse(user=UserResponse(**result.data[0]), is_new=True)
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("User registration failed")
            raise StorageError(str(e))

    def get_user_by_id(self, user_id: str) -> UserResponse:
        """Get user by ID"""
        try:
            result = self.supabase.table("users")\
                .select("*")\
                .eq("id", user_id)\
                .limit(1)\
                .execute()

            if not result.data:
                raise NotFoundError("User not found")

            return UserResponse(**result.data[0])
        except TeamhubError:
            raise
        except Exception as e:
            raise StorageError(str(e))

    def search_users(self, query: Optional[str] = None) -> List[UserPublicResponse]:
        """Case-insensitive substring match on name or id; all users when no query"""
        try:
            table = self.supabase.table("users")
            if not query:
                result = table.select(PUBLIC_COLUMNS).order("created_at").execute()
                return [UserPublicResponse(**u) for u in result.data]

            pattern = f"%{escape_like(query)}%"
            by_name = table.select(PUBLIC_COLUMNS).ilike("name", pattern).order("created_at").execute()
            by_id = table.select(PUBLIC_COLUMNS).ilike("id", pattern).order("created_at").execute()
            needle = query.lower()
            return [
                UserPublicResponse(**u) for u in merge_rows(by_name.data, by_id.data)
                if needle in (u.get("name") or "").lower() or needle in u["id"].lower()
            ]
        except Exception as e:
            raise StorageError(str(e))

    def get_public_profiles(self, user_ids: List[str]) -> Dict[str, Dict]:
        """Map of user id -> public profile row for the given ids (missing ids omitted)"""
        if not user_ids:
            return {}
        result = self.supabase.table("users")\
            .select(PUBLIC_COLUMNS)\
            .in_("id", list(set(user_ids)))\
            .execute()
        return {u["id"]: u for u in result.data or []}

    def set_status(self, user_id: str, status: str) -> UserResponse:
        """Update presence status"""
        if not status:
            raise ValidationError("Status is required")
        try:
            result = self.supabase.table("users")\
                .update({"status": status})\
                .eq("id", user_id)\
                .execute()

            if not result.data:
                raise NotFoundError("User not found")

            return UserResponse(**result.data[0])
        except TeamhubError:
            raise
        except Exception as e:
            raise StorageError(str(e))
