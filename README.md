# zbplugins

Building blocks for a group-chat bot: message segments, start-up
configuration, coloured log output, and the logic behind a collection of
small chat features, with SQLite storage where a feature needs it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The `zbplugins` command resolves the bot's start-up configuration:

```
zbplugins -h
zbplugins -u ws://127.0.0.1:8080 -n Bot -p / -s config.json
zbplugins -c config.json
```

Options:

- `-u` websocket URL (default `ws://127.0.0.1:8080`), `-t` access token
- `-n` nickname, `-p` command prefix (default `/`)
- `-l` response latency in ms (default 233), `-r` receive ring size
  (default 4096), `-x` maximum processing time in minutes (default 4)
- `-d` debug logging, `-w` warning logging (`-w` wins when both are given)
- `-c FILE` load a configuration file written by `-s`
- `-s FILE` save the configuration built from the options to a JSON file
- `-h` print usage

Remaining arguments that are integers are added as super users; others are
ignored.

## Modules

- `zbplugins.messages` — `Segment` and the helpers `text`, `image`,
  `record`, `at`, `reply` and `plain_text`.
- `zbplugins.config` — `BotConfig`, `parse_args`, `build_config`,
  `load_config`, `save_config` and the command's `main`.
- `zbplugins.logformat` — `ColorFormatter` and `level_color` for
  ANSI-coloured `[LEVEL] message` log lines.
- `zbplugins.chrev` — `flip` reverses English text and turns it upside down.
- `zbplugins.choose` — `split_options` and `choose` for "A 还是 B" decisions.
- `zbplugins.breakrepeat` — `RepeatBreaker` counts identical consecutive
  messages per group and returns a shuffled copy when a run gets too long.
- `zbplugins.chat` — `AirConditioner` for the per-group air-conditioner game
  and `name_reply` for when the bot is called by name.
- `zbplugins.links` — `waifu_url`, `alipay_voice_url`, `baidu_url`.
- `zbplugins.cpstory` — `CpStory`, `fill_story`, `split_names`.
- `zbplugins.chouxianghua` — `AbstractDictionary`, an SQLite pinyin/emoji
  table that translates text into emoji.
- `zbplugins.ahsai` — voice-name selection: `parse_command`,
  `is_known_name`, `name_menu`, `name_by_index`.
- `zbplugins.sysinfo` — system status via psutil (`cpu_percent`,
  `mem_percent`, `disk_report`, `status_report`) and the packed rate-limit
  setting (`decode_limit`, `encode_limit`, `parse_limit_command`).
- `zbplugins.ttsmode` — bit-packed reply-mode and voice settings:
  `format_list`, `reply_mode_index`, `pack_reply_mode`, `unpack_reply_mode`,
  `sound_index`, `pack_sound_mode`, `pack_default_sound_mode`,
  `resolve_sound_mode`, `reset_sound_mode`.
- `zbplugins.aipaint` — `ServerConfig` stored as JSON, `user_paths`,
  `avatar_url`.
- `zbplugins.antiabuse` — `AntiAbuseDB` for per-group banned words and ban
  records, with `clean_message` and `group_key`.
- `zbplugins.pushdb` — `Push` and `PushDB` for live and dynamic subscription
  storage.
- `zbplugins.card2msg` — turn dynamic, article, live-room and video cards
  (decoded JSON) into lists of message segments.

## Example

```python
from zbplugins.chrev import flip
from zbplugins.breakrepeat import RepeatBreaker

print(flip("I love you"))

breaker = RepeatBreaker()
for _ in range(5):
    out = breaker.feed(1, "hello")
print(out)  # the repeated message, shuffled
```

## What this package does not do

- It does not connect to a chat server or run a bot. The `zbplugins` command
  only builds, saves or loads the configuration and exits.
- It makes no network requests: the link and card helpers only build URLs
  and message segments from data you supply.
- It does not send messages; functions return text or segments for the
  caller to deliver.
- It prints no start-up banner or announcement board, and has no
  time-of-day persona replies.