# test/test_main.py
from main import main
from utils import StepTimer


def test_step_timer_accumulates():
    t = StepTimer()
    with t.timeit("load"):
        pass
    with t.timeit("load"):
        pass
    assert list(t.durations) == ["load"]
    assert t.summary_lines()[-1].startswith("total")


def test_billing_command(tmp_path, soyco_text):
    src = tmp_path / "navio.txt"
    src.write_text(soyco_text, encoding="utf-8")
    out = tmp_path / "out"

    assert main(["billing", str(src), "--out", str(out), "--unit-price", "350"]) == 0
    assert (out / "planilha_base.xlsx").exists()
    assert (out / "faturamento.txt").read_text(encoding="utf-8").count("R$ 700,00") == 2


def test_billing_command_reports_failure(tmp_path, capsys):
    src = tmp_path / "empty.txt"
    src.write_text("", encoding="utf-8")

    assert main(["billing", str(src), "--out", str(tmp_path)]) == 1
    assert "Dados insuficientes" in capsys.readouterr().out


def test_grain_command(tmp_path):
    src = tmp_path / "graos.txt"
    src.write_text("Name of shipper\tQtd per BL\tBL nbr\nCARGILL\t10\t1\n", encoding="utf-8")

    assert main(["grain", str(src), "--out", str(tmp_path), "--date", "2025-01-02"]) == 0
    assert (tmp_path / "recibos_graos.xlsx").exists()
