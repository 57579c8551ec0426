"""Recording, playback and storage of input replays ("macros")."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Tuple, Union

import msgpack

MAGIC = 0x421DC97E
VERSION = 4
OLDEST_VERSION = 2
MAX_PLACEMENTS = 20

# Layout of a version 2 record: kind, x, y, use, sprint, padding, delay.
_V2_RECORD = struct.Struct("<iffBBxxQ")
_KEYSTATE_SCALARS = 12


class ReplayKind(IntEnum):
    KEY = 0
    SPAWN_CAR = 1
    PLACE_ICE_RINK = 2
    PLACE_ERASE_CHANGES = 3
    SPAWN_CIRCLING_DRIVER = 4


class ReplayFormatError(ValueError):
    """Raised when replay data cannot be decoded."""


@dataclass(frozen=True)
class KeyState:
    """One sample of the player's input."""

    x: float = 0.0
    y: float = 0.0
    mx: float = 0.0
    my: float = 0.0
    use: int = 0
    sprint: int = 0
    ctrl: int = 0
    selected_item: int = 0
    drop: int = 0
    swap: int = 0
    swap_from: int = 0
    swap_to: int = 0
    placements: Tuple[Tuple[float, float], ...] = ()

    def __post_init__(self) -> None:
        placements = tuple((float(px), float(py)) for px, py in self.placements)
        if len(placements) > MAX_PLACEMENTS:
            raise ValueError(
                f"at most {MAX_PLACEMENTS} placements fit in a key state"
            )
        object.__setattr__(self, "placements", placements)

    def _to_wire(self) -> List[Any]:
        return [
            self.x, self.y, self.mx, self.my,
            self.use, self.sprint, self.ctrl, self.selected_item,
            self.drop, self.swap, self.swap_from, self.swap_to,
            [list(p) for p in self.placements],
        ]

    @classmethod
    def _from_wire(cls, fields: Sequence[Any]) -> "KeyState":
        if not isinstance(fields, list) or len(fields) != _KEYSTATE_SCALARS + 1:
            raise ValueError("malformed key state")
        *scalars, placements = fields
        return cls(*scalars, placements=tuple(tuple(p) for p in placements))


@dataclass(frozen=True)
class ReplayRecord:
    """An input sample or special action, ``delay`` seconds after the previous one."""

    kind: ReplayKind
    pkt: KeyState = KeyState()
    delay: float = 0.0


def _encode(record: ReplayRecord) -> bytes:
    return msgpack.packb(
        [int(record.kind), float(record.delay), record.pkt._to_wire()],
        use_bin_type=True,
    )


def dump_records(records: Sequence[ReplayRecord]) -> bytes:
    """Serialise records: magic, version, then an array of binary records."""
    parts = [
        msgpack.packb(MAGIC),
        msgpack.packb(VERSION),
        msgpack.packb([_encode(rec) for rec in records], use_bin_type=True),
    ]
    return b"".join(parts)


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _decode_v2(blob: bytes) -> ReplayRecord:
    if len(blob) < _V2_RECORD.size:
        raise ReplayFormatError("version 2 record is too short")
    kind, x, y, use, sprint, delay = _V2_RECORD.unpack_from(blob)
    try:
        replay_kind = ReplayKind(kind)
    except ValueError as exc:
        raise ReplayFormatError(f"unknown record kind {kind}") from exc
    pkt = KeyState(x=x, y=y, use=use, sprint=sprint)
    return ReplayRecord(replay_kind, pkt, float(delay))


def _decode_current(blob: bytes) -> ReplayRecord:
    try:
        fields = msgpack.unpackb(blob, raw=False)
        if not isinstance(fields, list) or len(fields) != 3:
            raise ValueError("malformed record")
        kind, delay, pkt = fields
        return ReplayRecord(ReplayKind(kind), KeyState._from_wire(pkt), float(delay))
    except (ValueError, TypeError, msgpack.OutOfData) as exc:
        raise ReplayFormatError(f"cannot decode record: {exc}") from exc


def parse_records(data: bytes) -> List[ReplayRecord]:
    """Decode replay data written by :func:`dump_records` or by version 2."""
    unpacker = msgpack.Unpacker(raw=False)
    unpacker.feed(data)
    try:
        magic = unpacker.unpack()
        if not _is_uint(magic) or magic != MAGIC:
            raise ReplayFormatError("not a replay file")
        version = unpacker.unpack()
        if not _is_uint(version):
            raise ReplayFormatError("missing replay version")
        if version < OLDEST_VERSION:
            raise ReplayFormatError(f"replay version {version} is not supported")
        count = unpacker.read_array_header()
        blobs = [unpacker.unpack() for _ in range(count)]
    except ReplayFormatError:
        raise
    except (msgpack.OutOfData, ValueError) as exc:
        raise ReplayFormatError(f"malformed replay data: {exc}") from exc

    decode = _decode_v2 if version == OLDEST_VERSION else _decode_current
    records = []
    for blob in blobs:
        if not isinstance(blob, bytes):
            raise ReplayFormatError("replay record is not binary")
        records.append(decode(blob))
    return records


class ReplayRecorder:
    """Records input samples with their timing and plays them back."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.is_recording = False
        self.is_playing = False
        self.records: Optional[List[ReplayRecord]] = None
        self.record_pos = 0
        self.playback_time = 0.0
        self._last_record_time = 0.0

    def start(self) -> None:
        """Begin a fresh recording, discarding earlier records."""
        self.is_recording = True
        self.records = []
        self._last_record_time = self._clock()

    def stop(self) -> None:
        self.is_recording = False
        self.is_playing = False
        self.record_pos = 0

    def clear(self) -> None:
        """Drop the records unless they are being recorded or played."""
        if self.records is None or self.is_playing or self.is_recording:
            return
        self.records = None
        self.record_pos = 0

    def begin_playback(self) -> None:
        if self.is_playing:
            return
        if not self.records:
            raise ValueError("there are no records to play back")
        self.is_playing = True
        self.record_pos = 0
        self.playback_time = self._clock()

    def _append(self, kind: ReplayKind, pkt: KeyState) -> None:
        now = self._clock()
        assert self.records is not None
        self.records.append(ReplayRecord(kind, pkt, now - self._last_record_time))
        self._last_record_time = self._clock()

    def record_keystate(self, state: KeyState) -> None:
        if not self.is_recording:
            return
        self._append(ReplayKind.KEY, state)

    def special_action(self, kind: ReplayKind) -> None:
        kind = ReplayKind(kind)
        if kind is ReplayKind.KEY:
            raise ValueError("key states are recorded with record_keystate")
        if not self.is_recording or self.is_playing:
            return
        self._append(kind, KeyState())

    def next_due(self) -> Optional[ReplayRecord]:
        """Return the record to replay now, or None if nothing is due yet."""
        if not self.is_playing or self.records is None:
            return None
        now = self._clock()
        if self.playback_time >= now:
            return None
        record = self.records[self.record_pos]
        self.playback_time = now + record.delay
        self.record_pos += 1
        if self.record_pos == len(self.records):
            self.is_playing = False
        return record

    def save(self, path: Union[str, Path]) -> None:
        """Write the records to ``path``; nothing is written without records."""
        if self.records is None:
            return
        Path(path).write_bytes(dump_records(self.records))

    def load(self, path: Union[str, Path]) -> None:
        self.records = parse_records(Path(path).read_bytes())
        self.record_pos = 0