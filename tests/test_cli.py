"""Flask CLI commands."""


def test_list_content(app, seeded):
    result = app.test_cli_runner().invoke(args=['list-content'])
    assert result.exit_code == 0
    assert 'slides: 1' in result.output
    assert 'announcements: 1' in result.output


def test_search_prints_ranked_results(app, seeded):
    result = app.test_cli_runner().invoke(args=['search', 'midterm'])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert '[assignments] Midterm Assignment' in lines[0]
    assert '[announcements] Exam moved' in lines[1]


def test_search_unrelated_query_lists_recent_items(app, seeded):
    result = app.test_cli_runner().invoke(args=['search', 'zebra'])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 2
    assert lines[0].split() == ['3', '[announcements]', 'Exam', 'moved', '()']
    assert lines[1].split() == ['1', '[assignments]', 'Midterm', 'Assignment', '()']


def test_search_without_matches(app, backend):
    backend.insert('slides', {'name': 'Old notes', 'uploadedBy': 'Prof X', 'date': '2020-01-01T00:00:00Z'})
    result = app.test_cli_runner().invoke(args=['search', 'zebra'])
    assert result.output.strip() == 'No results.'
