import pytest

import analyze_model
from frequency_table import WindowTable
from markov_model import MarkovModel


def test_overall_frequencies():
    results = analyze_model.overall_frequencies('aab', top=1)

    assert results == [('a', 2, pytest.approx(2 / 3))]


def test_analyze_orders():
    orders, windows, transitions = analyze_model.analyze_orders('abcabcabcabc', max_order=3)

    assert orders == [1, 2, 3]
    assert windows == [3, 3, 3]
    assert transitions == [11, 10, 9]


def test_analyze_orders_stops_on_short_corpus():
    orders, _, _ = analyze_model.analyze_orders('abc', max_order=5)

    assert orders == [1, 2]


def test_window_entropy():
    deterministic = WindowTable()
    deterministic.update('a')
    deterministic.finalize_probabilities()
    uniform = WindowTable()
    uniform.update('a')
    uniform.update('b')
    uniform.finalize_probabilities()

    assert analyze_model.window_entropy(deterministic) == pytest.approx(0.0)
    assert analyze_model.window_entropy(uniform) == pytest.approx(1.0)


def test_average_entropy():
    model = MarkovModel(1)
    model.train('abac')

    # a -> {b, c}, b -> {a}
    assert analyze_model.average_entropy(model) == pytest.approx(0.5)
    assert analyze_model.average_entropy(model, min_total=2) == pytest.approx(1.0)
    assert analyze_model.average_entropy(model, min_total=10) == 0.0


def test_plot_orders(tmp_path):
    output = tmp_path / 'orders.png'

    analyze_model.plot_orders([1, 2, 3], [3, 9, 20], [11, 10, 9], str(output))

    assert output.exists()
    assert output.stat().st_size > 0


def test_main(tmp_path, capsys):
    corpus = tmp_path / 'corpus.txt'
    corpus.write_text('the cat sat on the mat', encoding='utf-8')
    output = tmp_path / 'analysis.png'

    assert analyze_model.main([str(corpus), '--max-order', '3', '--output', str(output)]) == 0
    assert output.exists()
    assert 'Порядок  3' in capsys.readouterr().out
