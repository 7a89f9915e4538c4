from osm_area.config import DANGLING_REFERENCE_POLICY, DUPLICATE_TAG_POLICY, LOG_LEVEL


def test_default_policies():
    assert DANGLING_REFERENCE_POLICY in {'strict', 'lenient'}
    assert DUPLICATE_TAG_POLICY in {'reject', 'last_write_wins'}


def test_log_level_resolved():
    assert LOG_LEVEL in {'DEBUG', 'INFO', 'WARNING'}
