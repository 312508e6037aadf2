"""Deterministic fixture data service for development without an API key."""
from __future__ import annotations

import asyncio
import hashlib
import logging
import random
import re
import time
from dataclasses import dataclass
from typing import List, Optional

from domain.entities import (
    ChampionMastery,
    LeagueEntry,
    LiveGameRecord,
    MatchRecord,
    Summoner,
)
from domain.enums import QueueType, Rank, Region
from domain.errors import NotFoundError
from domain.interfaces import IDataService

logger = logging.getLogger(__name__)

CHAMPIONS = [
    (103, "Ahri"), (84, "Akali"), (12, "Alistar"), (32, "Amumu"), (22, "Ashe"),
    (53, "Blitzcrank"), (63, "Brand"), (51, "Caitlyn"), (122, "Darius"), (119, "Draven"),
    (81, "Ezreal"), (114, "Fiora"), (86, "Garen"), (104, "Graves"), (39, "Irelia"),
    (202, "Jhin"), (222, "Jinx"), (145, "Kaisa"), (55, "Katarina"), (64, "LeeSin"),
    (99, "Lux"), (21, "MissFortune"), (25, "Morgana"), (111, "Nautilus"), (61, "Orianna"),
    (555, "Pyke"), (92, "Riven"), (235, "Senna"), (412, "Thresh"), (4, "TwistedFate"),
    (110, "Varus"), (67, "Vayne"), (254, "Vi"), (157, "Yasuo"), (238, "Zed"),
]

ITEMS = [
    3006, 3031, 3033, 3036, 3046, 3072, 3074, 3078, 3083, 3089, 3091, 3094,
    3095, 3100, 3102, 3110, 3115, 3116, 3135, 3139, 3142, 3152, 3153, 3156,
]
TRINKETS = [3340, 3363, 3364]
SUMMONER_SPELLS = [1, 3, 4, 6, 7, 11, 12, 14, 21]
POSITIONS = ["TOP", "JUNGLE", "MIDDLE", "BOTTOM", "UTILITY"]
DIVISIONS = ["I", "II", "III", "IV"]

FAKE_NAMES = [
    "ShadowReaper99", "BladeOfSilence", "ArcaneStorm", "DragonSlayer42", "FrostByte",
    "NeonPhantom", "VoidWalkerX", "IronWill77", "CrystalMage", "ThunderPaw",
    "EmberFox", "LunarKnight", "QuantumShift", "StealthHawk", "ToxicRain",
]

MATCH_ID_PATTERN = re.compile(r"^[A-Z]+_\d+$")

# Fixed reference point so generated timestamps do not drift between runs.
FIXTURE_EPOCH_MS = 1_735_689_600_000  # 2025-01-01T00:00:00Z


@dataclass(frozen=True)
class _KnownSummoner:
    game_name: str
    tag_line: str
    region: str
    puuid: str
    profile_icon_id: int
    summoner_level: int
    tier: str
    rank: str
    league_points: int


KNOWN_SUMMONERS = [
    _KnownSummoner("Faker", "KR1", "kr", "fixture-puuid-faker-kr1", 6, 782, "CHALLENGER", "I", 1247),
    _KnownSummoner("Doublelift", "NA1", "na1", "fixture-puuid-doublelift-na1", 4813, 543, "GRANDMASTER", "I", 587),
    _KnownSummoner("xPeke", "EUW", "euw1", "fixture-puuid-xpeke-euw1", 3150, 421, "DIAMOND", "II", 64),
]

# Only this summoner is ever "in game".
LIVE_PUUID = KNOWN_SUMMONERS[0].puuid


def _rng(*parts: object) -> random.Random:
    digest = hashlib.sha256(":".join(str(p) for p in parts).encode("utf-8")).digest()
    return random.Random(int.from_bytes(digest[:8], "big"))


def _find_known(game_name: str, tag_line: str) -> Optional[_KnownSummoner]:
    for s in KNOWN_SUMMONERS:
        if s.game_name.lower() == game_name.lower() and s.tag_line.lower() == tag_line.lower():
            return s
    return None


class FixtureDataService(IDataService):
    """
    IDataService that fabricates stable data from its inputs.

    The same arguments always give the same output, and the error taxonomy
    matches the live service: a blank Riot ID or a malformed match id raises
    NotFoundError, and an unknown region raises InvalidRegionError.
    """

    def __init__(self, latency_seconds: float = 0.0):
        self.latency_seconds = latency_seconds

    async def _simulate_latency(self) -> None:
        if self.latency_seconds > 0:
            await asyncio.sleep(self.latency_seconds)

    async def get_summoner(self, region: str, game_name: str, tag_line: str) -> Summoner:
        r = Region.from_string(region)
        await self._simulate_latency()
        if not game_name.strip() or not tag_line.strip():
            raise NotFoundError(f"fixture://account/{game_name}#{tag_line}")

        known = _find_known(game_name, tag_line)
        if known:
            return Summoner(
                puuid=known.puuid,
                game_name=known.game_name,
                tag_line=known.tag_line,
                profile_icon_id=known.profile_icon_id,
                summoner_level=known.summoner_level,
            )

        rng = _rng("summoner", game_name.lower(), tag_line.lower(), r.value)
        return Summoner(
            puuid=f"fixture-puuid-{game_name.lower()}-{tag_line.lower()}-{r.value}",
            game_name=game_name,
            tag_line=tag_line,
            profile_icon_id=rng.randint(1, 5000),
            summoner_level=rng.randint(30, 600),
        )

    async def get_ranked_stats(self, region: str, puuid: str) -> List[LeagueEntry]:
        Region.from_string(region)
        await self._simulate_latency()
        rng = _rng("ranked", puuid)
        known = next((s for s in KNOWN_SUMMONERS if s.puuid == puuid), None)

        def make_entry(queue: QueueType, tier: Optional[str] = None,
                       division: Optional[str] = None, lp: Optional[int] = None) -> LeagueEntry:
            tier = tier or rng.choice(Rank.all_ranks()).value
            apex = Rank[tier].is_apex
            return LeagueEntry(
                queue_type=queue.value,
                tier=tier,
                rank="I" if apex else (division or rng.choice(DIVISIONS)),
                league_points=lp if lp is not None else rng.randint(0, 1500 if apex else 99),
                wins=rng.randint(40, 300),
                losses=rng.randint(35, 280),
                league_id=f"fixture-league-{hashlib.md5(f'{puuid}:{queue.value}'.encode()).hexdigest()[:12]}",
                hot_streak=rng.random() > 0.8,
                veteran=rng.random() > 0.6,
                fresh_blood=rng.random() > 0.85,
            )

        if known:
            solo = make_entry(QueueType.RANKED_SOLO_5x5, known.tier, known.rank, known.league_points)
        else:
            solo = make_entry(QueueType.RANKED_SOLO_5x5)
        return [solo, make_entry(QueueType.RANKED_FLEX_SR)]

    async def get_match_history(
        self, region: str, puuid: str, count: int = 20, start: int = 0
    ) -> List[str]:
        r = Region.from_string(region)
        await self._simulate_latency()
        count = min(max(1, count), 100)
        start = max(0, start)
        ids = []
        for i in range(start, start + count):
            n = int(hashlib.sha256(f"match:{puuid}:{i}".encode()).hexdigest()[:12], 16)
            ids.append(f"{r.match_prefix}_{5_000_000_000 + n % 1_000_000}")
        return ids

    async def get_match_details(self, region: str, match_id: str) -> MatchRecord:
        Region.from_string(region)
        await self._simulate_latency()
        if not MATCH_ID_PATTERN.match(match_id):
            raise NotFoundError(f"fixture://match/{match_id}")
        return self._build_match(match_id)

    async def get_match_details_batch(self, region: str, match_ids: List[str]) -> List[MatchRecord]:
        results = []
        for match_id in match_ids:
            try:
                results.append(await self.get_match_details(region, match_id))
            except NotFoundError:
                logger.warning(f"Dropping match {match_id} from batch: not found")
        return results

    async def get_live_game(self, region: str, puuid: str) -> Optional[LiveGameRecord]:
        r = Region.from_string(region)
        await self._simulate_latency()
        if puuid != LIVE_PUUID:
            return None

        rng = _rng("livegame", puuid)
        champs = rng.sample(CHAMPIONS, 10)
        names = rng.sample(FAKE_NAMES, 10)
        participants = []
        for i, (champ_id, _) in enumerate(champs):
            spell1, spell2 = rng.sample(SUMMONER_SPELLS, 2)
            participants.append({
                "puuid": puuid if i == 0 else f"fixture-puuid-live-{i}",
                "riotId": "Faker#KR1" if i == 0 else f"{names[i]}#FIX",
                "championId": champ_id,
                "teamId": 100 if i < 5 else 200,
                "spell1Id": spell1,
                "spell2Id": spell2,
            })
        bans = rng.sample(CHAMPIONS, 10)
        return {
            "gameId": 7_000_000_000 + rng.randint(0, 999_999),
            "gameMode": "CLASSIC",
            "gameType": "MATCHED_GAME",
            "gameQueueConfigId": QueueType.RANKED_SOLO_5x5.queue_id,
            "gameStartTime": int(time.time() * 1000) - rng.randint(60_000, 1_800_000),
            "mapId": 11,
            "platformId": r.value.upper(),
            "participants": participants,
            "bannedChampions": [
                {"championId": cid, "teamId": 100 if i < 5 else 200, "pickTurn": i + 1}
                for i, (cid, _) in enumerate(bans)
            ],
        }

    async def get_champion_masteries(self, region: str, puuid: str) -> List[ChampionMastery]:
        Region.from_string(region)
        await self._simulate_latency()
        rng = _rng("mastery", puuid)
        picks = rng.sample(CHAMPIONS, rng.randint(10, 20))
        masteries = [
            ChampionMastery(
                puuid=puuid,
                champion_id=champ_id,
                champion_level=rng.randint(1, 50),
                champion_points=rng.randint(1_000, 900_000),
                last_play_time=FIXTURE_EPOCH_MS - rng.randint(0, 90) * 86_400_000,
            )
            for champ_id, _ in picks
        ]
        masteries.sort(key=lambda m: m.champion_points, reverse=True)
        return masteries

    @staticmethod
    def _build_match(match_id: str) -> MatchRecord:
        rng = _rng("details", match_id)
        duration = rng.randint(1200, 2400)
        blue_win = rng.random() > 0.5
        champs = rng.sample(CHAMPIONS, 10)
        names = rng.sample(FAKE_NAMES, 10)
        puuids = [f"fixture-puuid-participant-{match_id}-{i}" for i in range(10)]

        participants = []
        for i, (champ_id, champ_name) in enumerate(champs):
            team_id = 100 if i < 5 else 200
            items = rng.sample(ITEMS, 6)
            kills = rng.randint(0, 18)
            minutes = duration / 60
            participants.append({
                "puuid": puuids[i],
                "riotIdGameName": names[i],
                "championId": champ_id,
                "championName": champ_name,
                "teamId": team_id,
                "teamPosition": POSITIONS[i % 5],
                "win": blue_win if team_id == 100 else not blue_win,
                "kills": kills,
                "deaths": rng.randint(0, 13),
                "assists": rng.randint(0, 22),
                "totalMinionsKilled": round(minutes * rng.uniform(5, 9)),
                "neutralMinionsKilled": rng.randint(0, 60),
                "goldEarned": rng.randint(8000, 18000),
                "visionScore": rng.randint(10, 60),
                "totalDamageDealtToChampions": rng.randint(8000, 30000),
                "totalDamageTaken": rng.randint(10000, 35000),
                **{f"item{slot}": item for slot, item in enumerate(items)},
                "item6": rng.choice(TRINKETS),
                "summoner1Id": rng.choice(SUMMONER_SPELLS),
                "summoner2Id": rng.choice(SUMMONER_SPELLS),
                "doubleKills": rng.randint(0, 2) if kills >= 2 else 0,
                "pentaKills": 1 if kills >= 14 and rng.random() > 0.9 else 0,
            })

        teams = []
        for team_id, win in ((100, blue_win), (200, not blue_win)):
            teams.append({
                "teamId": team_id,
                "win": win,
                "bans": [{"championId": cid, "pickTurn": n + 1} for n, (cid, _) in enumerate(rng.sample(CHAMPIONS, 5))],
                "objectives": {
                    name: {"first": False, "kills": rng.randint(0, cap)}
                    for name, cap in (("baron", 2), ("dragon", 5), ("riftHerald", 2),
                                      ("tower", 11), ("inhibitor", 3), ("champion", 50))
                },
            })

        return {
            "metadata": {"matchId": match_id, "participants": puuids, "dataVersion": "2"},
            "info": {
                "gameMode": "CLASSIC",
                "gameType": "MATCHED_GAME",
                "queueId": QueueType.RANKED_SOLO_5x5.queue_id,
                "gameDuration": duration,
                "gameCreation": FIXTURE_EPOCH_MS - rng.randint(3_600_000, 604_800_000),
                "gameVersion": "14.24.6789012",
                "mapId": 11,
                "participants": participants,
                "teams": teams,
            },
        }
