import io

import pytest

from algoshelf.pathquery import answer_queries, main, parse_graph

GRAPH_TEXT = "4\nABCD\n3\n<A,B><B,C><D,A>\n"


@pytest.fixture
def graph():
    return parse_graph(GRAPH_TEXT)


def test_parse_graph_reads_vertices_in_order(graph):
    assert graph.vertices == ["A", "B", "C", "D"]


def test_parse_graph_sets_arcs(graph):
    assert graph.has_arc("A", "B")
    assert graph.has_arc("D", "A")
    assert not graph.has_arc("B", "A")


def test_reachability_follows_arcs(graph):
    assert graph.has_path("A", "C")
    assert graph.has_path("D", "C")
    assert not graph.has_path("C", "A")


def test_answer_format_yes(graph):
    assert answer_queries(graph, [("A", "C")]) == ["From A to C: YES."]


def test_answer_format_no(graph):
    assert answer_queries(graph, [("C", "D")]) == ["From C to D: NO."]


def test_answers_agree_with_has_path(graph):
    names = graph.vertices
    queries = [(a, b) for a in names for b in names]
    answers = answer_queries(graph, queries)
    assert len(answers) == len(queries)
    for (a, b), line in zip(queries, answers):
        assert line.endswith("YES.") == graph.has_path(a, b)
        assert line.startswith(f"From {a} to {b}: ")


def test_vertex_reaches_itself(graph):
    assert all(
        line.endswith("YES.")
        for line in answer_queries(graph, [(v, v) for v in graph.vertices])
    )


def test_whitespace_between_arcs_is_accepted():
    spaced = parse_graph("3\nXYZ\n2\n<X,Y>\n<Y,Z>\n")
    assert spaced.has_path("X", "Z")
    assert not spaced.has_path("Z", "X")


def test_empty_arc_list():
    lonely = parse_graph("2\nPQ\n0\n")
    assert answer_queries(lonely, [("P", "Q")]) == ["From P to Q: NO."]


def test_too_few_vertex_names():
    with pytest.raises(ValueError):
        parse_graph("5\nAB")


def test_malformed_arc():
    with pytest.raises(ValueError):
        parse_graph("2\nAB\n1\n(A,B)\n")


def test_missing_arcs():
    with pytest.raises(ValueError):
        parse_graph("2\nAB\n2\n<A,B>\n")


def test_arc_with_unknown_vertex():
    with pytest.raises(ValueError):
        parse_graph("2\nAB\n1\n<A,Q>\n")


def test_trailing_text_rejected():
    with pytest.raises(ValueError):
        parse_graph(GRAPH_TEXT + "junk")


def test_missing_count():
    with pytest.raises(ValueError):
        parse_graph("ABCD")


def test_query_with_unknown_vertex(graph):
    with pytest.raises(KeyError):
        answer_queries(graph, [("A", "Z")])


def test_main_prints_answers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(GRAPH_TEXT + "2\n[A,C][C,A]\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["From A to C: YES.", "From C to A: NO."]


def test_main_reports_bad_query(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(GRAPH_TEXT + "1\n[A,Z]\n"))
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Z" in captured.err


def test_main_reports_malformed_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nAB"))
    assert main([]) == 1
    assert capsys.readouterr().err.strip()