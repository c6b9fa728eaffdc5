import math

import pandas as pd

from utils import evaluate_batch, load_expressions


def test_evaluate_batch_collects_results_and_errors():
    df = evaluate_batch(["2+3", "2+a", "1 + 1", "4-"])
    assert list(df.columns) == ['expression', 'result', 'error', 'error_type']
    assert len(df) == 4
    assert df.loc[0, 'result'] == 5
    assert math.isnan(df.loc[1, 'result'])
    assert df.loc[1, 'error_type'] == "FormatError"
    assert df.loc[2, 'result'] == 2
    assert df.loc[3, 'error_type'] == "EvalError"
    assert df.loc[3, 'error'] == "stack underflow"
    assert df['error'].notna().sum() == 2

def test_evaluate_batch_strict():
    df = evaluate_batch(["(1+2", "(1+2)"], strict=True)
    assert df.loc[0, 'error_type'] == "FormatError"
    assert df.loc[1, 'result'] == 3

def test_evaluate_batch_empty():
    df = evaluate_batch([])
    assert df.empty
    assert df['result'].dtype == float

def test_load_expressions_skips_blank_and_comment_lines(tmp_path):
    path = tmp_path / "expressions.txt"
    path.write_text("# header\n2+2\n\n  3*3  \n# 1/0\n", encoding="utf-8")
    assert load_expressions(str(path)) == ["2+2", "3*3"]

def test_batch_results_round_trip_through_csv(tmp_path):
    df = evaluate_batch(["2^10", "x"])
    out = tmp_path / "results.csv"
    df.to_csv(out, index=False)
    loaded = pd.read_csv(out)
    assert loaded.loc[0, 'result'] == 1024
    assert loaded.loc[1, 'error_type'] == "FormatError"
