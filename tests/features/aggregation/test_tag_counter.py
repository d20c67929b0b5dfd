from xmltally.features.aggregation.service.tag_counter import TagCounter
from tests.conftest import MALFORMED


def test_scan_end_to_end(record_tree, make_request):
    result = TagCounter().scan(make_request(record_tree))

    assert result.total_count == 3
    assert list(result.per_file_counts.values()) == [2, 1]


def test_scan_honours_extensions(record_tree, write_file, make_request):
    write_file("extra.out", "<RecordID/>")
    write_file("ignored.txt", "<RecordID/>")

    only_xml = TagCounter().scan(make_request(record_tree, extensions=("*.xml",)))
    with_out = TagCounter().scan(make_request(record_tree))

    assert only_xml.total_count == 3
    assert with_out.total_count == 4


def test_scan_with_progress_bar(record_tree, make_request, capsys):
    result = TagCounter().scan(make_request(record_tree), show_progress=True)

    captured = capsys.readouterr()
    assert result.total_count == 3
    assert captured.out == ""
    assert "Scanning" in captured.err


def test_debug_target_prefers_first_match(record_tree, make_request):
    counter = TagCounter()
    request = make_request(record_tree)
    result = counter.scan(request)

    assert counter.pick_debug_target(request, result) == (record_tree / "a.xml").resolve()


def test_debug_target_falls_back_to_parsable_file(tmp_path, write_file, make_request):
    write_file("a_broken.xml", MALFORMED)
    write_file("b_ok.xml", "<Batch><RecordId/></Batch>")
    counter = TagCounter()
    request = make_request(tmp_path)
    result = counter.scan(request)

    assert result.total_count == 0
    assert counter.pick_debug_target(request, result) == (tmp_path / "b_ok.xml").resolve()


def test_debug_target_none_when_nothing_parses(tmp_path, write_file, make_request):
    write_file("broken.xml", MALFORMED)
    counter = TagCounter()
    request = make_request(tmp_path)

    assert counter.pick_debug_target(request, counter.scan(request)) is None
