from dataclasses import FrozenInstanceError, fields

import pytest

from transmission_api.fields import OMITTED_FIELDS, TORRENT_FIELDS, requested_fields
from transmission_api.models import File, FileStats, Peer, Torrent, TorrentStatus


class TestTorrent:
    def test_defaults_are_zero_values(self):
        torrent = Torrent()
        assert torrent.id == 0
        assert torrent.name == ""
        assert torrent.percent_done == 0.0
        assert torrent.is_private is False
        assert torrent.files == ()
        assert torrent.peers_from == {}

    def test_from_dict_maps_wire_names(self):
        torrent = Torrent.from_dict({
            "id": 12,
            "name": "debian-12.6.0-amd64-netinst.iso",
            "hashString": "abcdef",
            "percentDone": 0.25,
            "rateDownload": 1024,
            "sizeWhenDone": 4096,
            "isPrivate": True,
            "seedRatioLimit": 2.0,
            "peersFrom": {"fromTracker": 3},
        })

        assert torrent.id == 12
        assert torrent.hash_string == "abcdef"
        assert torrent.percent_done == 0.25
        assert torrent.rate_download == 1024
        assert torrent.size_when_done == 4096
        assert torrent.is_private is True
        assert torrent.seed_ratio_limit == 2.0
        assert torrent.peers_from == {"fromTracker": 3}
        assert torrent.percent_complete == 25.0

    def test_from_dict_builds_nested_records(self):
        torrent = Torrent.from_dict({
            "files": [
                {"name": "a/poster.jpg", "bytesCompleted": 10, "length": 20},
                {"name": "a/movie.mp4", "length": 300},
            ],
            "fileStats": [
                {"bytesCompleted": 10, "wanted": True, "priority": 1},
                {"wanted": False},
            ],
            "peers": [{"address": "10.0.0.2", "port": 51413}],
        })

        assert torrent.files == (
            File(name="a/poster.jpg", bytes_completed=10, length=20),
            File(name="a/movie.mp4", length=300),
        )
        assert torrent.file_stats == (
            FileStats(bytes_completed=10, wanted=True, priority=1),
            FileStats(),
        )
        assert torrent.peers == (Peer(address="10.0.0.2"),)

    def test_from_dict_ignores_unknown_and_null_keys(self):
        torrent = Torrent.from_dict({"id": 3, "labels": ["tv"], "comment": None})
        assert torrent == Torrent(id=3)

    def test_snapshot_is_immutable(self):
        torrent = Torrent(id=1)
        with pytest.raises(FrozenInstanceError):
            torrent.id = 2

    def test_snapshot_is_hashable(self):
        torrent = Torrent.from_dict({
            "id": 1,
            "files": [{"name": "a.iso", "length": 10}],
            "priorities": [0, 1],
            "peersFrom": {"fromTracker": 3},
            "trackers": [{"announce": "udp://tracker.example:1337"}],
        })

        assert torrent.priorities == (0, 1)
        assert hash(torrent) == hash(Torrent.from_dict({"id": 1, "files": [{"name": "a.iso", "length": 10}]}))
        assert {torrent, Torrent(id=1), Torrent(id=2)} >= {Torrent(id=2)}
        assert len({Torrent(id=1), Torrent(id=1)}) == 1


class TestTorrentStatus:
    def test_status_codes(self):
        assert TorrentStatus.PAUSED == 0
        assert TorrentStatus.CHECK_WAIT == 1
        assert TorrentStatus.CHECK == 2
        assert TorrentStatus.DOWNLOAD == 4
        assert TorrentStatus.SEED == 8
        assert TorrentStatus.STOPPED == 16

    def test_compares_with_snapshot_status(self):
        assert Torrent.from_dict({"status": 16}).status == TorrentStatus.STOPPED


class TestFields:
    def test_field_list_matches_torrent_record(self):
        wire_names = {f.metadata["rpc"] for f in fields(Torrent)}
        assert set(TORRENT_FIELDS) == wire_names
        assert len(TORRENT_FIELDS) == len(wire_names)

    def test_default_omissions(self):
        assert set(OMITTED_FIELDS) == {
            "peers",
            "peersConnected",
            "peersFrom",
            "peersGettingFromUs",
            "peersSendingToUs",
            "priorities",
            "queuePosition",
            "trackers",
            "trackerStats",
            "wanted",
            "webseeds",
        }

    def test_requested_fields_skip_omitted(self):
        requested = requested_fields()
        assert "id" in requested
        assert "webseedsSendingToUs" in requested
        assert not set(requested) & set(OMITTED_FIELDS)

    def test_requested_fields_keep_order(self):
        assert requested_fields(omit=[]) == list(TORRENT_FIELDS)
        assert requested_fields(omit=["activityDate"])[0] == "addedDate"
