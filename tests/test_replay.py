import os
from pathlib import Path

import numpy as np
import pytest

from oneeuro.analysis.replay import (
    ReferenceData,
    compare_to_reference,
    load_reference,
    replay,
    synthetic_signal,
)
from oneeuro.config import GROUND_TRUTH, GROUND_TRUTH_ATOL, GROUND_TRUTH_URL
from oneeuro.filters.one_euro import OneEuroFilter

REFERENCE_CSV = Path(__file__).parent / "data" / "reference_120hz.csv"


def _write_csv(path, timestamps, noisy, filtered):
    lines = ["timestamp,signal,noisy,filtered"]
    for t, n, f in zip(timestamps, noisy, filtered):
        lines.append(f"{t!r},0.0,{n!r},{f!r}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_replay_matches_sample_by_sample_loop():
    t, _, noisy = synthetic_signal(1.0, 120.0, 0.2, seed=3)
    expected_filt = OneEuroFilter(120.0, beta=0.1)
    expected = [expected_filt.filter(float(v), float(ts)) for v, ts in zip(noisy, t)]

    out = replay(OneEuroFilter(120.0, beta=0.1), noisy, t)
    np.testing.assert_array_equal(out, np.array(expected))


def test_replay_without_timestamps_keeps_freq():
    filt = OneEuroFilter(60.0, beta=0.1)
    out = replay(filt, [0.0, 1.0, 2.0])
    assert out.shape == (3,)
    assert out[0] == 0.0
    assert filt.freq == 60.0


def test_replay_continues_filter_state():
    values = [0.0, 1.0, 0.5, 0.7, 0.2, 0.9]
    whole = replay(OneEuroFilter(120.0, beta=0.1), values)

    filt = OneEuroFilter(120.0, beta=0.1)
    parts = np.concatenate([replay(filt, values[:2]), replay(filt, values[2:])])
    np.testing.assert_array_equal(whole, parts)


def test_replay_rejects_mismatched_timestamps():
    with pytest.raises(ValueError):
        replay(OneEuroFilter(120.0), [1.0, 2.0], [0.0])


def test_load_reference_reads_named_columns(tmp_path):
    path = tmp_path / "ref.csv"
    _write_csv(path, [0.0, 0.5], [1.5, 2.5], [1.5, 2.0])
    ref = load_reference(path)
    assert len(ref) == 2
    np.testing.assert_array_equal(ref.timestamps, [0.0, 0.5])
    np.testing.assert_array_equal(ref.noisy, [1.5, 2.5])
    np.testing.assert_array_equal(ref.filtered, [1.5, 2.0])


def test_load_reference_single_row(tmp_path):
    path = tmp_path / "ref.csv"
    _write_csv(path, [0.0], [4.0], [4.0])
    assert len(load_reference(path)) == 1


def test_load_reference_requires_columns(tmp_path):
    path = tmp_path / "ref.csv"
    path.write_text("timestamp,value\n0.0,1.0\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_reference(path)


def test_compare_to_reference_passes_on_own_output():
    t, _, noisy = synthetic_signal(2.0, 120.0, 0.2, seed=1)
    expected = replay(GROUND_TRUTH.build(), noisy, t)
    report = compare_to_reference(ReferenceData(t, noisy, expected))
    assert report.passed
    assert report.first_mismatch is None
    assert report.max_abs_error == 0.0


def test_compare_to_reference_reports_first_mismatch():
    t, _, noisy = synthetic_signal(1.0, 120.0, 0.2, seed=2)
    expected = replay(GROUND_TRUTH.build(), noisy, t)
    expected[10] += 1e-3
    expected[20] += 1e-2
    report = compare_to_reference(ReferenceData(t, noisy, expected), atol=1e-4)
    assert not report.passed
    assert report.first_mismatch == 10
    assert report.max_abs_error == pytest.approx(1e-2)


def test_synthetic_signal_shape_and_seed():
    t, clean, noisy = synthetic_signal(2.0, 120.0, 0.2, seed=7)
    assert t.shape == clean.shape == noisy.shape == (241,)
    assert t[0] == 0.0
    assert t[-1] == pytest.approx(2.0)
    _, _, again = synthetic_signal(2.0, 120.0, 0.2, seed=7)
    np.testing.assert_array_equal(noisy, again)


def test_synthetic_signal_without_noise_is_clean():
    _, clean, noisy = synthetic_signal(1.0, 60.0, 0.0, seed=0)
    np.testing.assert_array_equal(clean, noisy)


def test_compare_to_reference_fails_on_nan_expected():
    t, _, noisy = synthetic_signal(1.0, 120.0, 0.2, seed=4)
    expected = replay(GROUND_TRUTH.build(), noisy, t)
    expected[10] = np.nan
    report = compare_to_reference(ReferenceData(t, noisy, expected))
    assert not report.passed
    assert report.first_mismatch == 10
    assert report.max_abs_error == np.inf


def test_synthetic_signal_rejects_negative_duration():
    with pytest.raises(ValueError):
        synthetic_signal(-1.0, 120.0)


def test_reference_fixture_regression():
    # Irregularly sampled sine with a step, filtered with the ground-truth
    # parameters and rounded to 10 decimals
    reference = load_reference(REFERENCE_CSV)
    assert len(reference) == 300
    assert np.ptp(np.diff(reference.timestamps)) > 1e-3

    report = compare_to_reference(reference, GROUND_TRUTH, GROUND_TRUTH_ATOL)
    i = report.first_mismatch
    assert report.passed, (
        f"Mismatch at index {i} (t={reference.timestamps[i]:.4f}): "
        f"got {report.outputs[i]:.6f}, expected {reference.filtered[i]:.6f}"
    )
    assert report.max_abs_error < 1e-8


@pytest.mark.network
def test_ground_truth_regression():
    source = os.environ.get("ONEEURO_GROUND_TRUTH", GROUND_TRUTH_URL)
    try:
        reference = load_reference(source)
    except (OSError, ValueError) as e:
        pytest.skip(f"Can't read ground-truth data from {source}: {e}")

    report = compare_to_reference(reference, GROUND_TRUTH, GROUND_TRUTH_ATOL)
    i = report.first_mismatch
    assert report.passed, (
        f"Mismatch at index {i} (t={reference.timestamps[i]:.4f}): "
        f"got {report.outputs[i]:.6f}, expected {reference.filtered[i]:.6f}"
    )
