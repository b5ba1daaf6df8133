from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import ASCENDING, DESCENDING, UpdateOne

from teamdesk.services.search import search_filter
from teamdesk.utils.mongo import parse_object_id, serialize_mongo


def _now():
    return datetime.now(timezone.utc)


class TeamRepository:
    def __init__(self, col):
        self.col = col

    def _doc(self, d):
        d["_id"] = str(d["_id"])
        return serialize_mongo(d)

    async def list(self, search: Optional[str] = None) -> List[Dict[str, Any]]:
        cur = self.col.find(search_filter(search), sort=[("order", ASCENDING)])
        return [self._doc(x) async for x in cur]

    async def get(self, team_id: str):
        oid = parse_object_id(team_id)
        if oid is None:
            return None
        d = await self.col.find_one({"_id": oid})
        return self._doc(d) if d else None

    async def max_order(self) -> Optional[int]:
        last = await self.col.find_one({}, {"order": 1}, sort=[("order", DESCENDING)])
        if not last or last.get("order") is None:
            return None
        return last["order"]

    async def create(self, data: dict) -> str:
        now = _now()
        data.update({
            "createdAt": now,
            "updatedAt": now,
        })
        r = await self.col.insert_one(data)
        return str(r.inserted_id)

    async def update(self, team_id: str, data: dict) -> bool:
        """$set the given fields; False when no team matched."""
        oid = parse_object_id(team_id)
        if oid is None:
            return False
        data["updatedAt"] = _now()
        r = await self.col.update_one({"_id": oid}, {"$set": data})
        return r.matched_count == 1

    async def delete(self, team_id: str) -> bool:
        oid = parse_object_id(team_id)
        if oid is None:
            return False
        r = await self.col.delete_one({"_id": oid})
        return r.deleted_count == 1

    async def delete_many(self, team_ids: List[str]) -> int:
        oids = [oid for oid in map(parse_object_id, team_ids) if oid is not None]
        if not oids:
            return 0
        r = await self.col.delete_many({"_id": {"$in": oids}})
        return r.deleted_count

    async def reorder(self, team_oids: List[ObjectId]) -> None:
        if not team_oids:
            return
        now = _now()
        ops = [
            UpdateOne({"_id": oid}, {"$set": {"order": index, "updatedAt": now}})
            for index, oid in enumerate(team_oids)
        ]
        await self.col.bulk_write(ops)

    async def pull_member(self, team_id: str, member_id: str) -> bool:
        """False only when the team is missing; a missing member is a no-op."""
        oid = parse_object_id(team_id)
        if oid is None:
            return False
        r = await self.col.update_one(
            {"_id": oid},
            {
                "$pull": {"members": {"_id": member_id}},
                "$set": {"updatedAt": _now()},
            },
        )
        return r.matched_count == 1

    async def rename_member(self, team_id: str, member_id: str, name: str) -> bool:
        oid = parse_object_id(team_id)
        if oid is None:
            return False
        r = await self.col.update_one(
            {"_id": oid, "members._id": member_id},
            {"$set": {"members.$.name": name, "updatedAt": _now()}},
        )
        return r.matched_count == 1
