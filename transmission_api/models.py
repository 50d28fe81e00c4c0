"""
Snapshot records for torrents reported by the Transmission daemon.

Torrent mirrors the torrent-get field set, with nested File, FileStats and
Peer records. Each dataclass field names its wire key in metadata["rpc"];
keys missing from a response leave the field at its zero value. Lists arrive
as tuples, and container fields are left out of the hash so snapshots can
be kept in sets.
"""

from dataclasses import dataclass, field, fields
from enum import IntEnum
from typing import Any, Dict, Tuple


class TorrentStatus(IntEnum):
    """Status codes reported in Torrent.status."""
    PAUSED = 0
    CHECK_WAIT = 1 << 0
    CHECK = 1 << 1
    DOWNLOAD = 1 << 2
    SEED = 1 << 3
    STOPPED = 1 << 4


def _rpc(name, default=None, item=None, factory=None):
    metadata = {"rpc": name, "item": item}
    if factory is not None:
        return field(default_factory=factory, hash=False, metadata=metadata)
    return field(default=default, metadata=metadata)


def _from_wire(cls, data: Dict[str, Any]):
    kwargs = {}
    for f in fields(cls):
        value = data.get(f.metadata["rpc"])
        if value is None:
            continue
        item = f.metadata["item"]
        if item is not None:
            value = tuple(_from_wire(item, entry) for entry in value)
        elif isinstance(value, list):
            value = tuple(value)
        kwargs[f.name] = value
    return cls(**kwargs)


@dataclass(frozen=True)
class File:
    name: str = _rpc("name", "")
    bytes_completed: int = _rpc("bytesCompleted", 0)
    length: int = _rpc("length", 0)


@dataclass(frozen=True)
class FileStats:
    bytes_completed: int = _rpc("bytesCompleted", 0)
    wanted: bool = _rpc("wanted", False)
    priority: int = _rpc("priority", 0)


@dataclass(frozen=True)
class Peer:
    address: str = _rpc("address", "")


@dataclass(frozen=True)
class Torrent:
    """Read-only snapshot of one torrent (immutable).

    Note: sizes are in bytes, rates in bytes/second, dates in epoch seconds.
    """

    activity_date: int = _rpc("activityDate", 0)
    added_date: int = _rpc("addedDate", 0)
    bandwidth_priority: int = _rpc("bandwidthPriority", 0)
    comment: str = _rpc("comment", "")
    corrupt_ever: int = _rpc("corruptEver", 0)
    creator: str = _rpc("creator", "")
    date_created: int = _rpc("dateCreated", 0)
    desired_available: int = _rpc("desiredAvailable", 0)
    done_date: int = _rpc("doneDate", 0)
    download_dir: str = _rpc("downloadDir", "")
    downloaded_ever: int = _rpc("downloadedEver", 0)
    download_limit: int = _rpc("downloadLimit", 0)
    download_limited: bool = _rpc("downloadLimited", False)
    error: int = _rpc("error", 0)
    error_string: str = _rpc("errorString", "")
    eta: int = _rpc("eta", 0)
    eta_idle: int = _rpc("etaIdle", 0)
    files: Tuple[File, ...] = _rpc("files", item=File, factory=tuple)
    file_stats: Tuple[FileStats, ...] = _rpc("fileStats", item=FileStats, factory=tuple)
    hash_string: str = _rpc("hashString", "")
    have_unchecked: int = _rpc("haveUnchecked", 0)
    have_valid: int = _rpc("haveValid", 0)
    honors_session_limits: bool = _rpc("honorsSessionLimits", False)
    id: int = _rpc("id", 0)
    is_finished: bool = _rpc("isFinished", False)
    is_private: bool = _rpc("isPrivate", False)
    is_stalled: bool = _rpc("isStalled", False)
    left_until_done: int = _rpc("leftUntilDone", 0)
    magnet_link: str = _rpc("magnetLink", "")
    manual_announce_time: int = _rpc("manualAnnounceTime", 0)
    max_connected_peers: int = _rpc("maxConnectedPeers", 0)
    metadata_percent_complete: float = _rpc("metadataPercentComplete", 0.0)
    name: str = _rpc("name", "")
    peer_limit: int = _rpc("peerLimit", 0)
    peers: Tuple[Peer, ...] = _rpc("peers", item=Peer, factory=tuple)
    peers_connected: int = _rpc("peersConnected", 0)
    peers_from: Dict[str, int] = _rpc("peersFrom", factory=dict)
    peers_getting_from_us: int = _rpc("peersGettingFromUs", 0)
    peers_sending_to_us: int = _rpc("peersSendingToUs", 0)
    percent_done: float = _rpc("percentDone", 0.0)
    pieces: str = _rpc("pieces", "")  # base64 bitfield
    piece_count: int = _rpc("pieceCount", 0)
    piece_size: int = _rpc("pieceSize", 0)
    priorities: Tuple[int, ...] = _rpc("priorities", factory=tuple)
    queue_position: int = _rpc("queuePosition", 0)
    rate_download: int = _rpc("rateDownload", 0)  # bytes/second
    rate_upload: int = _rpc("rateUpload", 0)  # bytes/second
    recheck_progress: float = _rpc("recheckProgress", 0.0)
    seconds_downloading: int = _rpc("secondsDownloading", 0)
    seconds_seeding: int = _rpc("secondsSeeding", 0)
    seed_idle_limit: int = _rpc("seedIdleLimit", 0)
    seed_idle_mode: int = _rpc("seedIdleMode", 0)
    seed_ratio_limit: float = _rpc("seedRatioLimit", 0.0)
    seed_ratio_mode: int = _rpc("seedRatioMode", 0)
    size_when_done: int = _rpc("sizeWhenDone", 0)
    start_date: int = _rpc("startDate", 0)
    status: int = _rpc("status", 0)
    trackers: Tuple[Dict[str, Any], ...] = _rpc("trackers", factory=tuple)
    tracker_stats: Tuple[Dict[str, Any], ...] = _rpc("trackerStats", factory=tuple)
    total_size: int = _rpc("totalSize", 0)
    torrent_file: str = _rpc("torrentFile", "")
    uploaded_ever: int = _rpc("uploadedEver", 0)
    upload_limit: int = _rpc("uploadLimit", 0)
    upload_limited: bool = _rpc("uploadLimited", False)
    upload_ratio: float = _rpc("uploadRatio", 0.0)
    wanted: Tuple[bool, ...] = _rpc("wanted", factory=tuple)
    webseeds: Tuple[str, ...] = _rpc("webseeds", factory=tuple)
    webseeds_sending_to_us: int = _rpc("webseedsSendingToUs", 0)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Torrent":
        """Build a snapshot from one entry of a torrent-get response."""
        return _from_wire(cls, data)

    @property
    def percent_complete(self) -> float:
        return self.percent_done * 100
