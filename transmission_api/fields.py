"""
Field names requested from the daemon by torrent-get.

TORRENT_FIELDS lists every wire field of models.Torrent and is maintained
by hand alongside it. Some fields are expensive for the daemon to produce,
so requested_fields() drops the configured OMITTED_FIELDS by default.
"""

from typing import Iterable, List, Optional

from .config import Config


TORRENT_FIELDS = (
    "activityDate",
    "addedDate",
    "bandwidthPriority",
    "comment",
    "corruptEver",
    "creator",
    "dateCreated",
    "desiredAvailable",
    "doneDate",
    "downloadDir",
    "downloadedEver",
    "downloadLimit",
    "downloadLimited",
    "error",
    "errorString",
    "eta",
    "etaIdle",
    "files",
    "fileStats",
    "hashString",
    "haveUnchecked",
    "haveValid",
    "honorsSessionLimits",
    "id",
    "isFinished",
    "isPrivate",
    "isStalled",
    "leftUntilDone",
    "magnetLink",
    "manualAnnounceTime",
    "maxConnectedPeers",
    "metadataPercentComplete",
    "name",
    "peerLimit",
    "peers",
    "peersConnected",
    "peersFrom",
    "peersGettingFromUs",
    "peersSendingToUs",
    "percentDone",
    "pieces",
    "pieceCount",
    "pieceSize",
    "priorities",
    "queuePosition",
    "rateDownload",
    "rateUpload",
    "recheckProgress",
    "secondsDownloading",
    "secondsSeeding",
    "seedIdleLimit",
    "seedIdleMode",
    "seedRatioLimit",
    "seedRatioMode",
    "sizeWhenDone",
    "startDate",
    "status",
    "trackers",
    "trackerStats",
    "totalSize",
    "torrentFile",
    "uploadedEver",
    "uploadLimit",
    "uploadLimited",
    "uploadRatio",
    "wanted",
    "webseeds",
    "webseedsSendingToUs",
)

OMITTED_FIELDS = tuple(Config.OMITTED_FIELDS)


def requested_fields(omit: Optional[Iterable[str]] = None) -> List[str]:
    """Return TORRENT_FIELDS without the omitted ones, keeping their order."""
    skip = set(OMITTED_FIELDS if omit is None else omit)
    return [name for name in TORRENT_FIELDS if name not in skip]
