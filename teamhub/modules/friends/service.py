from supabase import Client
from teamhub.modules.friends.schemas import (
    FriendRequestCreate, FriendProfile, FriendRequestResponse
)
from teamhub.modules.users.service import UserService
from teamhub.core.exceptions import TeamhubError, ValidationError, NotFoundError, StorageError
from teamhub.core.identity import canonical_pair
from teamhub.database.queries import first_row
from typing import Dict, List, Optional
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

REQUEST_DIRECTIONS = ("received", "sent")


def _profile(row: Optional[Dict]) -> Optional[FriendProfile]:
    if not row:
        return None
    return FriendProfile(
        id=row["id"],
        name=row["name"],
        avatar=row.get("avatar"),
        provider=row.get("provider"),
    )


class FriendService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.users = UserService(supabase)

    def _are_friends(self, user_a: str, user_b: str) -> bool:
        lo, hi = canonical_pair(user_a, user_b)
        result = self.supabase.table("friends")\
            .select("id")\
            .eq("user_id", lo)\
            .eq("friend_id", hi)\
            .limit(1)\
            .execute()
        return bool(result.data)

    def _pending_between(self, user_a: str, user_b: str) -> bool:
        for from_id, to_id in ((user_a, user_b), (user_b, user_a)):
            result = self.supabase.table("friend_requests")\
                .select("id")\
                .eq("from_user_id", from_id)\
                .eq("to_user_id", to_id)\
                .eq("status", "pending")\
                .limit(1)\
                .execute()
            if result.data:
                return True
        return False

    def send_request(self, request_data: FriendRequestCreate) -> FriendRequestResponse:
        """Send a friend request"""
        from_id, to_id = request_data.from_user_id, request_data.to_user_id
        if not from_id or not to_id:
            raise ValidationError("Both user IDs are required")
        if from_id == to_id:
            raise ValidationError("Cannot send a friend request to yourself")

        try:
            if self._are_friends(from_id, to_id):
                raise ValidationError("Already friends")
            if self._pending_between(from_id, to_id):
                raise ValidationError("Request already exists")

            # A previously answered request between the same users is reopened
            result = self.supabase.table("friend_requests").upsert({
                "from_user_id": from_id,
                "to_user_id": to_id,
                "status": "pending",
                "created_at": datetime.now(timezone.utc).isoformat(),
            }, on_conflict="from_user_id,to_user_id").execute()

            if not result.data:
                raise StorageError("Failed to create friend request")

            logger.info("Friend request %s -> %s", from_id, to_id)
            return FriendRequestResponse(**result.data[0])
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Sending friend request failed")
            raise StorageError(str(e))

    def respond(self, request_id: int, accept: bool) -> FriendRequestResponse:
        """Accept or reject a friend request; accepting creates the friendship"""
        try:
            result = self.supabase.table("friend_requests")\
                .update({"status": "accepted" if accept else "rejected"})\
                .eq("id", request_id)\
                .execute()

            request = first_row(result)
            if request is None:
                raise NotFoundError("Request not found")

            if accept:
                lo, hi = canonical_pair(request["from_user_id"], request["to_user_id"])
                self.supabase.table("friends").upsert({
                    "user_id": lo,
                    "friend_id": hi,
                    "created_at": datetime.now(timezone.utc).isoformat(),
                }, on_conflict="user_id,friend_id", ignore_duplicates=True).execute()
                logger.info("Friendship %s <-> %s", lo, hi)

            return FriendRequestResponse(**request)
        except TeamhubError:
            raise
        except Exception as e:
            logger.exception("Answering friend request %s failed", request_id)
            raise StorageError(str(e))

    def list_friends(self, user_id: str) -> List[FriendProfile]:
        """Public profiles of the user's friends"""
        if not user_id:
            raise ValidationError("User ID is required")
        try:
            table = self.supabase.table("friends")
            as_first = table.select("*").eq("user_id", user_id).order("created_at").execute()
            as_second = table.select("*").eq("friend_id", user_id).order("created_at").execute()
            friend_ids = [f["friend_id"] for f in as_first.data] + [f["user_id"] for f in as_second.data]

            profiles = self.users.get_public_profiles(friend_ids)
            return [_profile(profiles[fid]) for fid in friend_ids if fid in profiles]
        except TeamhubError:
            raise
        except Exception as e:
            raise StorageError(str(e))

    def list_requests(self, user_id: str, direction: str = "received") -> List[FriendRequestResponse]:
        """Pending requests the user received (or sent), with the other party's profile"""
        if not user_id:
            raise ValidationError("User ID is required")
        if direction not in REQUEST_DIRECTIONS:
            raise ValidationError(f"direction must be one of {', '.join(REQUEST_DIRECTIONS)}")

        own_column, other_column = (
            ("to_user_id", "from_user_id") if direction == "received" else ("from_user_id", "to_user_id")
        )
        try:
            result = self.supabase.table("friend_requests")\
                .select("*")\
                .eq(own_column, user_id)\
                .eq("status", "pending")\
                .order("created_at", desc=True)\
                .execute()

            profiles = self.users.get_public_profiles([r[other_column] for r in result.data])
            requests = []
            for row in result.data:
                response = FriendRequestResponse(**row)
                other = _profile(profiles.get(row[other_column]))
                if direction == "received":
                    response.from_user = other
                else:
                    response.to_user = other
                requests.append(response)
            return requests
        except TeamhubError:
            raise
        except Exception as e:
            raise StorageError(str(e))
