"""
Resource services against a throw-away SQLite file (no HTTP).
"""
from __future__ import annotations

import asyncio
import threading
from contextlib import asynccontextmanager

import pytest
from sqlalchemy.exc import OperationalError

from core.errors import Internal, InvalidInput, NotFound, Unauthorized
from core.models.identity import Identity
from core.services.accounts import AccountService
from core.services.bmi import BMIRecordService
from core.services.diet import DietPlanService
from core.services.fitness import FitnessActivityService, FitnessGoalService
from services.db import Database

ALICE = Identity(user_id="alice")
BOB = Identity(user_id="bob")


class _BrokenDatabase(Database):
    @asynccontextmanager
    async def session(self):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        yield  # pragma: no cover


# ── auth / validation happen before any I/O ─────────────────────────
def test_unauthorized_checked_before_validation():
    svc = BMIRecordService(Database("sqlite+aiosqlite://"))   # never connected
    with pytest.raises(Unauthorized):
        asyncio.run(svc.create({"height": 10}, None))


def test_invalid_payload_never_reaches_database():
    svc = BMIRecordService(Database("sqlite+aiosqlite://"))   # session() would raise
    with pytest.raises(InvalidInput):
        asyncio.run(svc.create({"height": 10, "weight": 70}, ALICE))


def test_persistence_failure_maps_to_internal():
    svc = BMIRecordService(_BrokenDatabase("sqlite+aiosqlite://"))
    with pytest.raises(Internal) as exc:
        asyncio.run(svc.create({"height": 170, "weight": 70}, ALICE))
    assert "connection refused" not in exc.value.message
    with pytest.raises(Internal):
        asyncio.run(svc.list_own(ALICE))


# ── BMI ─────────────────────────────────────────────────────────────
def test_bmi_round_trip_is_owner_scoped(with_db):
    async def scenario(db):
        svc = BMIRecordService(db)
        first = await svc.create({"height": 170, "weight": 70, "bmi": 99, "category": "x"}, ALICE)
        second = await svc.create({"height": 170, "weight": 50}, ALICE)
        return await svc.list_own(ALICE), await svc.list_own(BOB), first, second

    mine, theirs, first, second = with_db(scenario)
    assert theirs == []
    assert [r["id"] for r in mine] == [second, first]      # newest first
    oldest = mine[1]
    assert oldest["bmi"] == 24.2 and oldest["category"] == "Normal weight"
    assert oldest["user_id"] == "alice"
    assert oldest["date"] is not None


# ── diet plans ──────────────────────────────────────────────────────
def test_diet_plan_keeps_meal_order(with_db):
    meals = [
        {"name": n, "description": "", "calories": 400, "protein": 20, "carbs": 40, "fats": 10}
        for n in ("Breakfast", "Lunch", "Dinner")
    ]

    async def scenario(db):
        svc = DietPlanService(db)
        await svc.create(
            {"name": "Bulk", "goalType": "weight_gain", "targetCalories": 3000, "meals": meals},
            ALICE,
        )
        return await svc.list_own(ALICE)

    [plan] = with_db(scenario)
    assert [m["name"] for m in plan["meals"]] == ["Breakfast", "Lunch", "Dinner"]
    assert plan["goal_type"] == "weight_gain"


def test_diet_plans_listed_newest_first(with_db):
    meal = {"name": "Snack", "description": "", "calories": 200,
            "protein": 5, "carbs": 20, "fats": 8}

    async def scenario(db):
        svc = DietPlanService(db)
        ids = [
            await svc.create(
                {"name": name, "goalType": "maintenance", "targetCalories": 2200,
                 "meals": [meal]},
                ALICE,
            )
            for name in ("first", "second", "third")
        ]
        return ids, await svc.list_own(ALICE)

    ids, plans = with_db(scenario)
    assert [p["id"] for p in plans] == ids[::-1]
    assert all(p["date"].tzinfo is not None for p in plans)


# ── activities ──────────────────────────────────────────────────────
def test_activity_calories_estimated_when_missing(with_db):
    async def scenario(db):
        svc = FitnessActivityService(db)
        await svc.create({"activityType": "cardio", "name": "Run", "duration": 30}, ALICE)
        await svc.create(
            {"activityType": "strength", "name": "Lift", "duration": 60, "weight": 80}, ALICE
        )
        await svc.create(
            {"activityType": "sports", "name": "Match", "duration": 90, "calories": 512}, ALICE
        )
        return await svc.list_own(ALICE)

    by_name = {a["name"]: a["calories"] for a in with_db(scenario)}
    assert by_name == {"Run": 280, "Lift": 400, "Match": 512}


def test_activities_listed_newest_first(with_db):
    async def scenario(db):
        svc = FitnessActivityService(db)
        ids = [
            await svc.create({"activityType": "other", "name": name, "duration": 20}, ALICE)
            for name in ("walk", "swim", "hike")
        ]
        await svc.create({"activityType": "other", "name": "bob", "duration": 20}, BOB)
        return ids, await svc.list_own(ALICE)

    ids, activities = with_db(scenario)
    assert [a["id"] for a in activities] == ids[::-1]


def test_delete_is_owner_scoped_and_repeatable(with_db):
    async def scenario(db):
        svc = FitnessActivityService(db)
        act = await svc.create({"activityType": "other", "name": "Walk", "duration": 15}, ALICE)

        with pytest.raises(NotFound):
            await svc.delete(act, BOB)
        still_there = await svc.list_own(ALICE)

        await svc.delete(act, ALICE)
        with pytest.raises(NotFound):
            await svc.delete(act, ALICE)
        with pytest.raises(NotFound):
            await svc.delete("does-not-exist", ALICE)
        return still_there, await svc.list_own(ALICE)

    before, after = with_db(scenario)
    assert len(before) == 1
    assert after == []


# ── goals ───────────────────────────────────────────────────────────
def _goal(name: str, deadline: str, target: float = 10) -> dict:
    return {"name": name, "target": target, "unit": "km", "deadline": deadline}


def test_goals_sorted_by_deadline_ascending(with_db):
    async def scenario(db):
        svc = FitnessGoalService(db)
        await svc.create(_goal("later", "2027-03-01T00:00:00Z"), ALICE)
        await svc.create(_goal("sooner", "2026-11-01T00:00:00Z"), ALICE)
        await svc.create(_goal("middle", "2027-01-15T00:00:00Z"), ALICE)
        return await svc.list_own(ALICE)

    assert [g["name"] for g in with_db(scenario)] == ["sooner", "middle", "later"]


def test_progress_update_touches_only_progress_fields(with_db):
    async def scenario(db):
        svc = FitnessGoalService(db)
        gid = await svc.create(_goal("10k", "2026-12-01T00:00:00Z"), ALICE)
        await svc.update_progress(gid, {"progress": 4, "name": "renamed", "target": 1}, ALICE)
        after_partial = (await svc.list_own(ALICE))[0]
        # caller-asserted completion below target is accepted
        await svc.update_progress(gid, {"progress": 5, "completed": True}, ALICE)
        return after_partial, (await svc.list_own(ALICE))[0]

    partial, final = with_db(scenario)
    assert partial["progress"] == 4
    assert partial["name"] == "10k" and partial["target"] == 10
    assert partial["completed"] is False
    assert final["completed"] is True and final["progress"] == 5


def test_progress_update_by_other_user_is_not_found(with_db):
    async def scenario(db):
        svc = FitnessGoalService(db)
        gid = await svc.create(_goal("10k", "2026-12-01T00:00:00Z"), ALICE)
        with pytest.raises(NotFound):
            await svc.update_progress(gid, {"progress": 9}, BOB)
        return (await svc.list_own(ALICE))[0]

    assert with_db(scenario)["progress"] == 0


def test_auto_complete_switch(with_db):
    async def scenario(db):
        manual = FitnessGoalService(db)
        auto = FitnessGoalService(db, auto_complete=True)
        a = await manual.create(_goal("manual", "2026-12-01T00:00:00Z"), ALICE)
        b = await manual.create(_goal("auto", "2026-12-02T00:00:00Z"), ALICE)
        await manual.update_progress(a, {"progress": 12}, ALICE)
        await auto.update_progress(b, {"progress": 12}, ALICE)
        return {g["name"]: g["completed"] for g in await manual.list_own(ALICE)}

    assert with_db(scenario) == {"manual": False, "auto": True}


# ── accounts ────────────────────────────────────────────────────────
def test_bcrypt_runs_off_the_event_loop(with_db, monkeypatch):
    threads = []

    def fake_hash(password):
        threads.append(threading.current_thread())
        return "hashed:" + password

    def fake_check(password, hashed):
        threads.append(threading.current_thread())
        return hashed == "hashed:" + password

    monkeypatch.setattr("core.services.accounts.hash_password", fake_hash)
    monkeypatch.setattr("core.services.accounts.check_password", fake_check)
    creds = {"email": "ann@fitlife.app", "password": "longenough"}

    async def scenario(db):
        svc = AccountService(db)
        user_id = await svc.register({"name": "Ann", **creds})
        logged_in, _ = await svc.login(creds)
        return user_id, logged_in

    user_id, logged_in = with_db(scenario)
    assert user_id == logged_in
    assert len(threads) == 2
    assert all(t is not threading.main_thread() for t in threads)
