import logging

from character_creator.assets.diagnostics import (
    DuplicateEntry,
    PairingDiagnostics,
    SingleLayerDiagnostics,
    report_layered_asset_diagnostics,
    report_single_layer_asset_diagnostics,
)


def _messages(caplog):
    return [record.getMessage() for record in caplog.records]


def test_clean_diagnostics_log_nothing(caplog):
    caplog.set_level(logging.WARNING)

    report_layered_asset_diagnostics(PairingDiagnostics(), enabled=True)

    assert caplog.records == []


def test_each_category_logs_one_warning(caplog):
    caplog.set_level(logging.WARNING)
    diagnostics = PairingDiagnostics(
        missing_bg=["hair_1_0", "hair_2_0"],
        missing_outline=["hair_3_0"],
        unrecognized=["/a/hair/hair.png"],
        duplicates=[DuplicateEntry(key="hair_0_0", existing_path="/a/one.png", new_path="/a/two.png")],
    )

    report_layered_asset_diagnostics(diagnostics, enabled=True)

    messages = _messages(caplog)
    assert len(messages) == 4
    assert all(record.levelno == logging.WARNING for record in caplog.records)
    assert "[character assets] Unrecognized filenames:\n/a/hair/hair.png" in messages
    assert '[character assets] Duplicate keys:\n- "hair_0_0"\n  Existing: /a/one.png\n  New: /a/two.png' in messages
    assert "[character assets] Missing bg layer for: hair_1_0, hair_2_0" in messages
    assert "[character assets] Missing outline layer for: hair_3_0" in messages


def test_reporting_disabled_outside_dev_mode(caplog):
    caplog.set_level(logging.DEBUG)

    report_layered_asset_diagnostics(PairingDiagnostics(missing_bg=["hair_1_0"]), enabled=False)
    report_single_layer_asset_diagnostics(
        "eyes",
        SingleLayerDiagnostics(duplicates=[DuplicateEntry("eyes0", "/a", "/b")]),
        enabled=False,
    )

    assert caplog.records == []


def test_single_layer_report_covers_duplicates_only(caplog):
    caplog.set_level(logging.WARNING)
    diagnostics = SingleLayerDiagnostics(
        duplicates=[DuplicateEntry(key="eyes0", existing_path="/a/eyes0.png", new_path="/a/eyes0.PNG")],
        skipped=["/a/eyes/notes.txt"],
    )

    report_single_layer_asset_diagnostics("eyes", diagnostics, enabled=True)

    [message] = _messages(caplog)
    assert message.startswith("[character assets] Duplicate eyes ids:")
    assert "notes.txt" not in message


def test_is_clean_reflects_any_issue():
    assert PairingDiagnostics().is_clean()
    assert not PairingDiagnostics(unrecognized=["x"]).is_clean()
