"""Painting server configuration and per-user working files."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path

QQ_AVATAR_URL = "http://q4.qlogo.cn/g?b=qq&nk={}&s=640"
IMAGE_URL = "https://gchat.qpic.cn/gchatpic_new//--{}/0"

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class ServerConfig:
    """Address, token and interval of the painting server, kept in a JSON file."""

    file: Path
    base_url: str = ""
    token: str = ""
    interval: int = 0
    _loaded: bool = field(default=False, repr=False, compare=False)

    def update(self, base_url: str, token: str, interval: int) -> None:
        """Change the settings (empty strings keep the old value) and save them."""
        if base_url:
            self.base_url = base_url
        if token:
            self.token = token
        self.interval = interval
        payload = {"base_url": self.base_url, "token": self.token, "interval": self.interval}
        Path(self.file).write_text(json.dumps(payload) + "\n", encoding="utf-8")

    def load(self) -> None:
        """Read the settings from the file unless all of them are already set."""
        if self.base_url and self.token and self.interval != 0:
            return
        path = Path(self.file)
        if not path.exists():
            raise FileNotFoundError("no server config")
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError("server config must be a JSON object")
        self.base_url = raw.get("base_url", self.base_url)
        self.token = raw.get("token", self.token)
        self.interval = int(raw.get("interval", self.interval))


def user_paths(datapath, user: int) -> tuple[Path, list[Path]]:
    """Create the user's directory and return it with the two head image paths."""
    usrdir = Path(datapath) / "users" / str(user)
    usrdir.mkdir(parents=True, exist_ok=True)
    return usrdir, [usrdir / "0.gif", usrdir / "1.gif"]


def avatar_url(value: str) -> str:
    """Return the address of an account's avatar, or of a picture given by its hash."""
    if _INTEGER.fullmatch(value):
        return QQ_AVATAR_URL.format(value)
    return IMAGE_URL.format(value.upper())