import json

from tip5lab.config import Settings
from tip5lab.evaluation import (
    EvaluationReport,
    analyze_linear_layer,
    analyze_lookup_table,
    compute_diffusion,
    evaluate_permutation,
    is_circulant,
)
from tip5lab.permutation import MDS_MATRIX_FIRST_COLUMN, MDS_MATRIX_FIRST_ROW, PermutationSpec, build_permutation, tip5
from tip5lab.permutation.linear import linear_identity, mds_multiply
from tip5lab.utils.repro import make_run_dir, read_json, write_json


def test_lookup_table_analysis():
    res = analyze_lookup_table()
    assert res.sbox_size == 256
    assert res.is_bijective
    assert res.fixed_points == [0, 255]
    assert res.matches_cube_map
    # b -> 255 - b maps L(b) -> 255 - L(b): the XOR difference 0xFF is deterministic
    assert res.ddt_max == 256
    assert res.lat_max_abs == 96
    assert "bijective" in res.summary()


def test_lookup_table_analysis_identity():
    res = analyze_lookup_table(list(range(256)), table_name="identity")
    assert res.is_bijective
    assert len(res.fixed_points) == 256
    assert not res.matches_cube_map
    assert res.lat_max_abs == 256


def test_linear_analysis_mds():
    res = analyze_linear_layer(mds_multiply, component_id="linear.tip5_mds")
    assert res.is_circulant
    assert res.all_entries_nonzero
    assert res.first_row == list(MDS_MATRIX_FIRST_ROW)
    assert res.first_column == list(MDS_MATRIX_FIRST_COLUMN)


def test_linear_analysis_identity():
    res = analyze_linear_layer(linear_identity, component_id="linear.identity")
    assert res.is_circulant
    assert not res.all_entries_nonzero
    assert not is_circulant([[1, 2], [1, 2]])


def test_diffusion_tip5():
    res = compute_diffusion(tip5(), trials=2, seed=42)
    assert res.full_diffusion
    assert res.per_position_changed_fraction == [1.0] * 16
    assert 0.4 < res.bit_flip_mean < 0.6
    assert "PASS" in res.summary()


def test_diffusion_without_linear_layer():
    spec = PermutationSpec(name="no-mds", components={
        "lookup_sbox": "sbox.split_and_lookup",
        "power_sbox": "sbox.power7",
        "linear": "linear.identity",
    })
    res = compute_diffusion(build_permutation(spec), trials=2, seed=42, positions=[0, 7])
    assert not res.full_diffusion
    assert res.min_changed_outputs == 1
    assert len(res.per_position_changed_fraction) == 2


def test_evaluate_permutation_report(tmp_path):
    settings = Settings(diffusion_trials=1, run_sbox_analysis=False, global_seed=7)
    progress = []
    report = evaluate_permutation(settings=settings, progress_callback=lambda s, i, n: progress.append(s))
    assert isinstance(report, EvaluationReport)
    assert progress == ["diffusion", "linear"]
    assert report.sbox is None
    assert report.issues() == []
    assert report.vectors["permute_zeros"][0] == 9513097171871388188
    assert report.vectors["permute_fixed_length_1_to_10"][:2] == [10818500669765797222, 7750847691288459381]

    d = report.to_dict()
    assert d["permutation"] == "Tip5"
    assert d["diffusion"]["full_diffusion"] is True
    assert d["vectors"]["permute_zeros"][0] == "9513097171871388188"

    paths = make_run_dir(tmp_path, "Tip5 eval")
    write_json(paths.report_json, d)
    assert read_json(paths.report_json)["permutation"] == "Tip5"
    assert paths.run_dir.name.endswith("_Tip5_eval")
    json.dumps(d)
    assert "Tip5" in report.to_summary()


def test_report_flags_missing_diffusion():
    spec = PermutationSpec(name="no-mds", components={
        "lookup_sbox": "sbox.split_and_lookup",
        "power_sbox": "sbox.power7",
        "linear": "linear.identity",
    })
    report = evaluate_permutation(spec, settings=Settings(diffusion_trials=1, run_sbox_analysis=False))
    issues = report.issues()
    assert len(issues) == 2
    assert "Issues:" in report.to_summary()
