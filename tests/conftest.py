import pytest

from payloads import make_history_entry, make_session, wrap


@pytest.fixture
def activity_body():
    return wrap({
        "stream_count": "2",
        "total_bandwidth": 12000,
        "wan_bandwidth": 8000,
        "lan_bandwidth": 4000,
        "stream_count_direct_play": 1,
        "stream_count_direct_stream": 0,
        "stream_count_transcode": 1,
        "sessions": [
            make_session(),
            make_session(
                full_title="The Expanse - Dulcinea",
                media_type="episode",
                container="mkv",
                transcode_container="mpegts",
                secure=0,
                progress_percent="100",
                user="bob",
            ),
        ],
    })


@pytest.fixture
def history_body():
    return wrap({
        "recordsTotal": 3,
        "recordsFiltered": 3,
        "draw": 1,
        "data": [
            make_history_entry("Arrival", user="carol", duration=6960),
            make_history_entry("The Expanse - Dulcinea", duration=2700),
            make_history_entry("Around the World", user="alice", duration=429),
        ],
    })
