from datetime import datetime, timedelta, timezone

from lsview.time import TimeFormat

OLD = 0
PLUS_FIVE_THIRTY = timezone(timedelta(hours=5, minutes=30))


def _now() -> float:
    return datetime.now(timezone.utc).timestamp()


def test_long_iso_epoch():
    assert TimeFormat.LONG_ISO.format_local(OLD) == "1970-01-01 00:00"


def test_default_old_shows_year():
    assert TimeFormat.DEFAULT_FORMAT.format_local(OLD) == " 1 Jan  1970"


def test_full_iso_zoned_has_offset():
    text = TimeFormat.FULL_ISO.format_zoned(OLD, PLUS_FIVE_THIRTY)
    assert text.endswith("+0530")


def test_iso_old_is_date_of_long_iso():
    assert TimeFormat.ISO_FORMAT.format_local(OLD) == TimeFormat.LONG_ISO.format_local(OLD)[:10]


def test_iso_recent_drops_year():
    now = _now()
    assert TimeFormat.ISO_FORMAT.format_local(now) == TimeFormat.LONG_ISO.format_local(now)[5:]


def test_default_recent_has_time_not_year():
    now = _now()
    text = TimeFormat.DEFAULT_FORMAT.format_local(now)
    assert text.endswith(TimeFormat.LONG_ISO.format_local(now)[-5:])
    assert str(datetime.now(timezone.utc).year) not in text.split()[-1]


def test_full_iso_starts_with_long_iso():
    t = 1_234_567_890.25
    full = TimeFormat.FULL_ISO.format_local(t)
    assert full.startswith(TimeFormat.LONG_ISO.format_local(t))
    assert full.endswith(".250000000")


def test_zoned_shifts_by_offset():
    t = 1_000_000_000
    shifted = t + 5 * 3600 + 30 * 60
    assert TimeFormat.LONG_ISO.format_zoned(t, PLUS_FIVE_THIRTY) == TimeFormat.LONG_ISO.format_local(shifted)


def test_zoned_utc_matches_local_except_offset():
    t = 987_654_321.5
    local = TimeFormat.FULL_ISO.format_local(t)
    zoned = TimeFormat.FULL_ISO.format_zoned(t, timezone.utc)
    assert zoned.startswith(local)
    assert len(zoned) == len(local) + 6


def test_negative_time_rounds_down():
    full = TimeFormat.FULL_ISO.format_local(-0.5)
    assert full[:10] == TimeFormat.ISO_FORMAT.format_local(-1)
    assert full.endswith(".500000000")


def test_zoned_non_full_formats_have_no_offset():
    for fmt in (TimeFormat.DEFAULT_FORMAT, TimeFormat.ISO_FORMAT, TimeFormat.LONG_ISO):
        assert fmt.format_zoned(OLD, timezone.utc) == fmt.format_local(OLD)