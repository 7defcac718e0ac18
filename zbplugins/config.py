"""Command-line options and the JSON configuration file of the bot."""

from __future__ import annotations

import argparse
import json
import logging
import os
from dataclasses import dataclass, field
from datetime import timedelta

log = logging.getLogger(__name__)

DEFAULT_URL = "ws://127.0.0.1:8080"
DEFAULT_NICKNAME = "桎岚"
EXTRA_NICKNAMES = ("亚托莉", "桎岚")
# Owner accounts compiled in; add ids here to make them super users always.
DEFAULT_SUPER_USERS: tuple[int, ...] = ()

_NS_PER_US = 1000


@dataclass
class BotConfig:
    """Bot settings plus the websocket endpoints it connects through."""

    nicknames: list[str] = field(default_factory=list)
    command_prefix: str = "/"
    super_users: list[int] = field(default_factory=list)
    ring_len: int = 4096
    latency: timedelta = timedelta(milliseconds=233)
    max_process_time: timedelta = timedelta(minutes=4)
    ws_clients: list[dict[str, str]] = field(default_factory=list)
    ws_servers: list[dict[str, str]] = field(default_factory=list)

    @property
    def drivers(self) -> list[dict[str, str]]:
        """All endpoints: clients first, then servers."""
        return [*self.ws_clients, *self.ws_servers]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("-d", action="store_true", help="Enable debug level log and higher.")
    parser.add_argument("-w", action="store_true", help="Enable warning level log and higher.")
    parser.add_argument("-h", action="store_true", help="Display this help.")
    parser.add_argument("-t", default="", help="Set AccessToken of WSClient.")
    parser.add_argument("-u", default=DEFAULT_URL, help="Set Url of WSClient.")
    parser.add_argument("-n", default=DEFAULT_NICKNAME, help="Set default nickname.")
    parser.add_argument("-p", default="/", help="Set command prefix.")
    parser.add_argument("-c", default="", help="Run from config file.")
    parser.add_argument("-s", default="", help="Save default config to file and exit.")
    parser.add_argument("-l", type=int, default=233, help="Response latency (ms).")
    parser.add_argument("-r", type=int, default=4096, help="Receiving buffer ring size.")
    parser.add_argument("-x", type=int, default=4, help="Max process time (min).")
    parser.add_argument("users", nargs="*", help="Super user ids.")
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line options; positional arguments that are not integers are dropped."""
    args = _build_parser().parse_args(argv)
    super_users = []
    for item in args.users:
        try:
            super_users.append(int(item, 10))
        except ValueError:
            continue
    super_users.extend(DEFAULT_SUPER_USERS)
    args.super_users = super_users
    return args


def _log_level(args: argparse.Namespace) -> int | None:
    if args.w:
        return logging.WARNING
    if args.d:
        return logging.DEBUG
    return None


def build_config(args: argparse.Namespace) -> BotConfig:
    """Build the configuration from parsed command-line options."""
    return BotConfig(
        nicknames=[args.n, *EXTRA_NICKNAMES],
        command_prefix=args.p,
        super_users=list(args.super_users),
        ring_len=args.r,
        latency=timedelta(milliseconds=args.l),
        max_process_time=timedelta(minutes=args.x),
        ws_clients=[{"url": args.u, "access_token": args.t}],
    )


def _duration_to_ns(value: timedelta) -> int:
    return (value // timedelta(microseconds=1)) * _NS_PER_US


def _ns_to_duration(value) -> timedelta:
    return timedelta(microseconds=int(value or 0) / _NS_PER_US)


def _endpoint_to_json(endpoint: dict[str, str]) -> dict[str, str]:
    return {"Url": endpoint.get("url", ""), "AccessToken": endpoint.get("access_token", "")}


def _endpoint_from_json(raw: dict) -> dict[str, str]:
    return {"url": raw.get("Url", ""), "access_token": raw.get("AccessToken", "")}


def _to_json(config: BotConfig) -> dict:
    return {
        "zero": {
            "nickname": list(config.nicknames),
            "command_prefix": config.command_prefix,
            "super_users": list(config.super_users),
            "ring_len": config.ring_len,
            "latency": _duration_to_ns(config.latency),
            "max_process_time": _duration_to_ns(config.max_process_time),
        },
        "ws": [_endpoint_to_json(e) for e in config.ws_clients],
        "wss": [_endpoint_to_json(e) for e in config.ws_servers] or None,
    }


def load_config(path) -> BotConfig:
    """Read a configuration file written by save_config."""
    with open(path, encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, dict):
        raise ValueError("configuration must be a JSON object")
    zero = raw.get("zero") or {}
    return BotConfig(
        nicknames=list(zero.get("nickname") or []),
        command_prefix=zero.get("command_prefix", ""),
        super_users=[int(u) for u in zero.get("super_users") or []],
        ring_len=int(zero.get("ring_len", 0)),
        latency=_ns_to_duration(zero.get("latency")),
        max_process_time=_ns_to_duration(zero.get("max_process_time")),
        ws_clients=[_endpoint_from_json(e) for e in raw.get("ws") or []],
        ws_servers=[_endpoint_from_json(e) for e in raw.get("wss") or []],
    )


def save_config(config: BotConfig, path) -> None:
    """Write the configuration as JSON."""
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(_to_json(config), fh, ensure_ascii=False)
        fh.write("\n")


def main(argv=None) -> int:
    """Resolve the configuration from the command line; save it if asked."""
    parser = _build_parser()
    args = parse_args(argv)
    if args.h:
        print("Usage:")
        print(parser.format_help())
        return 0
    level = _log_level(args)
    if level is not None:
        logging.getLogger().setLevel(level)

    if args.c:
        config = load_config(args.c)
        log.info("[main] 从 %s 读取配置文件", args.c)
        log.info("[main] %d 个连接", len(config.drivers))
        return 0

    config = build_config(args)
    if args.s:
        save_config(config, args.s)
        log.info("[main] 配置文件已保存到 %s", args.s)
        return 0
    log.info("[main] 连接 %s", os.fspath(config.ws_clients[0]["url"]))
    return 0