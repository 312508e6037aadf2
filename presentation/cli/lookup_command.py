from __future__ import annotations

import argparse
import json
from typing import Any, Iterable, List, Optional

from application.use_cases import LoadMatchHistoryUseCase, LoadSummonerProfileUseCase, parse_riot_id
from core.logging.logger import StructuredLogger, get_logger
from domain.entities import MatchRecord
from domain.enums import Region
from domain.errors import RiotStatsError
from domain.interfaces import IDataService
from .errors import describe_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="riot-stats", description="League of Legends player statistics")
    parser.add_argument("--json", action="store_true", help="print raw JSON instead of a summary")
    sub = parser.add_subparsers(dest="command", required=True)

    regions = [r.value for r in Region.all_regions()]

    def _with_player(p: argparse.ArgumentParser) -> argparse.ArgumentParser:
        p.add_argument("region", choices=regions)
        p.add_argument("riot_id", help="GameName-TagLine")
        return p

    _with_player(sub.add_parser("profile", help="summoner and ranked stats"))
    matches = _with_player(sub.add_parser("matches", help="recent matches"))
    matches.add_argument("--count", type=int, default=None)
    _with_player(sub.add_parser("masteries", help="champion masteries"))
    _with_player(sub.add_parser("live", help="current game, if any"))

    match = sub.add_parser("match", help="one match by id")
    match.add_argument("region", choices=regions)
    match.add_argument("match_id")
    return parser


def _participant_line(match: MatchRecord, puuid: str) -> str:
    info = match.get("info", {})
    me = next((p for p in info.get("participants", []) if p.get("puuid") == puuid), None)
    match_id = match.get("metadata", {}).get("matchId", "?")
    minutes = info.get("gameDuration", 0) // 60
    if not me:
        return f"{match_id}  {info.get('gameMode', '?')}  {minutes}m"
    result = "WIN " if me.get("win") else "LOSS"
    kda = f"{me.get('kills', 0)}/{me.get('deaths', 0)}/{me.get('assists', 0)}"
    return f"{match_id}  {result}  {me.get('championName', '?'):<12} {kda:<9} {minutes}m"


class LookupCommand:
    """One-shot lookups against whichever data service backend is configured."""

    def __init__(self, data_service: IDataService, *, json_out: bool = False) -> None:
        self.data_service = data_service
        self.json_out = json_out
        self.logger: StructuredLogger = get_logger(__name__, service="cli")

    def _emit(self, payload: Any, lines: Iterable[str]) -> None:
        if self.json_out:
            print(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))
        else:
            for line in lines:
                print(line)

    async def profile(self, region: str, riot_id: str) -> None:
        profile = await LoadSummonerProfileUseCase(self.data_service).execute(region, riot_id)
        s = profile.summoner
        server = Region.from_string(region).label
        lines = [f"{s.riot_id} ({server})  level {s.summoner_level}  icon {s.profile_icon_id}"]
        if not profile.ranked_entries:
            lines.append("  Unranked")
        for e in profile.ranked_entries:
            queue = e.queue.queue_name if e.queue else e.queue_type
            # apex tiers have a single division
            tier = e.tier if e.tier_rank and e.tier_rank.is_apex else f"{e.tier} {e.rank}"
            lines.append(
                f"  {queue:<16} {tier} {e.league_points} LP  "
                f"{e.wins}W {e.losses}L ({e.win_rate:.1f}%)"
            )
        self._emit(profile.to_dict(), lines)

    async def matches(self, region: str, riot_id: str, count: Optional[int] = None) -> None:
        game_name, tag_line = parse_riot_id(riot_id)
        summoner = await self.data_service.get_summoner(region, game_name, tag_line)
        matches = await LoadMatchHistoryUseCase(self.data_service).execute(region, summoner.puuid, count)
        lines = [f"{summoner.riot_id}: {len(matches)} recent matches"]
        lines.extend(f"  {_participant_line(m, summoner.puuid)}" for m in matches)
        self._emit({'matches': matches}, lines)

    async def match(self, region: str, match_id: str) -> None:
        match = await self.data_service.get_match_details(region, match_id)
        info = match.get("info", {})
        lines = [f"{match_id}  {info.get('gameMode', '?')}  {info.get('gameDuration', 0) // 60}m"]
        for p in info.get("participants", []):
            lines.append(
                f"  [{p.get('teamId')}] {p.get('championName', '?'):<12} "
                f"{p.get('kills', 0)}/{p.get('deaths', 0)}/{p.get('assists', 0)}"
            )
        self._emit({'match': match}, lines)

    async def masteries(self, region: str, riot_id: str) -> None:
        game_name, tag_line = parse_riot_id(riot_id)
        summoner = await self.data_service.get_summoner(region, game_name, tag_line)
        masteries = await self.data_service.get_champion_masteries(region, summoner.puuid)
        lines = [f"{summoner.riot_id}: {len(masteries)} champions"]
        lines.extend(
            f"  champion {m.champion_id:<5} level {m.champion_level:<3} {m.champion_points:>9,} pts"
            for m in masteries[:10]
        )
        self._emit({'masteries': [m.to_dict() for m in masteries]}, lines)

    async def live(self, region: str, riot_id: str) -> None:
        game_name, tag_line = parse_riot_id(riot_id)
        summoner = await self.data_service.get_summoner(region, game_name, tag_line)
        game = await self.data_service.get_live_game(region, summoner.puuid)
        if game is None:
            self._emit({'liveGame': None}, [f"{summoner.riot_id} is not in a game"])
            return
        lines = [f"{summoner.riot_id} is in game {game.get('gameId')} ({game.get('gameMode', '?')})"]
        self._emit({'liveGame': game}, lines)

    async def run(self, argv: List[str]) -> int:
        args = build_parser().parse_args(argv)
        self.json_out = self.json_out or args.json
        self.logger.debug(f"Parsed arguments: {vars(args)}")
        self.logger.info(f"Running {args.command} on {args.region}")
        try:
            if args.command == "profile":
                await self.profile(args.region, args.riot_id)
            elif args.command == "matches":
                await self.matches(args.region, args.riot_id, args.count)
            elif args.command == "match":
                await self.match(args.region, args.match_id)
            elif args.command == "masteries":
                await self.masteries(args.region, args.riot_id)
            elif args.command == "live":
                await self.live(args.region, args.riot_id)
            self.logger.success(f"{args.command} completed")
            return 0
        except RiotStatsError as exc:
            view = describe_error(exc)
            log = self.logger.error if view.status >= 500 else self.logger.warning
            log(f"{args.command} failed: {exc}")
            self._emit(view.to_dict(), [f"Error: {view.message}"])
            return 1
        except Exception as exc:
            self.logger.exception(f"{args.command} crashed")
            view = describe_error(exc)
            self._emit(view.to_dict(), [f"Error: {view.message}"])
            return 1
