import json

import pytest

from tipaglyph import TipaConfig, tipa


def test_report_false_returns_string():
    out = tipa("hello", report=False)
    assert isinstance(out, str)


def test_report_true_returns_tuple_and_core_fields():
    raw = r"\textipa{D@} \textfoo \tone{14} \*q"
    converted, report = tipa(raw, report=True)

    assert converted == r"ðə \textfoo ˩˦ q"
    assert report.input_len == len(raw)
    assert report.output_len == len(converted)
    assert report.changed is True
    assert report.resolved_commands == 2
    assert report.tone_fallbacks == 1
    assert report.unresolved_commands == [r"\textfoo", r"\*q"]
    assert report.safe_mode is False


def test_report_unterminated_group():
    raw = r"\tipa{@"
    converted, report = tipa(raw, report=True)
    assert converted == raw
    assert report.changed is False
    assert report.unterminated_groups == 1
    assert report.unresolved_commands == [raw]


def test_report_safe_mode_flag():
    converted, report = tipa(r"\*r", safe_mode=True, report=True)
    assert converted == "r"
    assert report.safe_mode is True
    assert report.resolved_commands == 0


def test_report_block_mode():
    converted, report = tipa("D@", mode="block", report=True)
    assert converted == "ðə"
    assert report.changed is True


def test_report_empty_input():
    converted, report = tipa("", report=True)
    assert converted == ""
    assert report.input_len == 0
    assert report.output_len == 0
    assert report.unresolved_commands == []


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        tipa("x", mode="prose")


def test_report_to_jsonl(tmp_path):
    _, report = tipa(r"\textfoo and \textbar{x}", report=True)

    out = tmp_path / "nested" / "unresolved.jsonl"
    report.to_jsonl(out)

    rows = [json.loads(line) for line in out.read_text(encoding="utf-8").splitlines()]
    assert rows == [
        {"index": 0, "raw": r"\textfoo"},
        {"index": 1, "raw": r"\textbar{x}"},
    ]


def test_report_summary_counts_unresolved():
    _, report = tipa(r"\textfoo \textfoo", report=True)
    summary = report.summary()
    assert summary["unresolved_count"] == 2
    assert summary["input_len"] == len(r"\textfoo \textfoo")


def test_config_from_mapping_accepts_plugin_keys():
    cfg = TipaConfig.from_mapping(
        {"enableSafeMode": True, "autoConvert": False, "unrelated": 1}
    )
    assert cfg.safe_mode is True
    assert cfg.auto_convert is False
    assert cfg.use_custom_font is True
    assert cfg.inline_styling is False


def test_config_from_json(tmp_path):
    path = tmp_path / "settings.json"
    settings = {"safe_mode": True, "inlineStyling": True}
    path.write_text(json.dumps(settings), encoding="utf-8")
    cfg = TipaConfig.from_json(path)
    assert cfg == TipaConfig(safe_mode=True, inline_styling=True)


def test_config_from_json_rejects_non_object(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        TipaConfig.from_json(path)
