"""Smoke test for the demo script."""

from cds_pricing import demo


def test_demo_prints_valuation(capsys, monkeypatch) -> None:
    monkeypatch.setenv("CDS_PRICING_LOG_LEVEL", "WARNING")
    demo.main()
    out = capsys.readouterr().out
    assert "Contingent leg" in out
    assert "Par spread" in out
    assert out.strip().endswith("Done.")
