from __future__ import annotations

from mixdesign.config import CSV_COLUMNS
from mixdesign.export import export_csv, runs_dataframe

HEADER = (
    "id,timestamp,projectName,projectSite,mixId,castingDate,fck,cementGrade,exposure,"
    "fckMean,w_c,water,cement,fineAgg,coarseAgg,isWcOk,isCementOk,isGradeOk"
)


def test_empty_export_is_header_only():
    assert export_csv([]) == HEADER
    assert len(CSV_COLUMNS) == 18


def test_export_row_formatting(service):
    service.create_run(
        20,
        cement_grade="OPC 53",
        exposure="moderate",
        project_name="Tower, Block A",
        project_site="Pune,MH",
        mix_id="M20,01",
    )
    lines = export_csv(service.all_runs()).split("\n")
    assert lines[0] == HEADER
    assert len(lines) == 2

    cells = lines[1].split(",")
    assert len(cells) == 18
    row = dict(zip(CSV_COLUMNS, cells))
    assert row["id"] == "1"
    assert row["timestamp"] == "2026-01-02T03:04:05.678Z"
    assert row["projectName"] == "Tower  Block A"
    assert row["projectSite"] == "Pune MH"
    assert row["mixId"] == "M20 01"
    assert row["castingDate"] == "2026-01-02"
    assert row["fck"] == "20"
    assert row["cementGrade"] == "OPC 53"
    assert row["exposure"] == "moderate"
    assert row["fckMean"] == "26.44"
    assert row["w_c"] == "0.477"
    assert row["water"] == "189.4"
    assert row["cement"] == "380.91"
    assert (row["isWcOk"], row["isCementOk"], row["isGradeOk"]) == ("true", "true", "false")


def test_export_uses_insertion_order_and_blank_cement_grade(service):
    service.create_run(25)
    service.create_run(30.5)
    lines = export_csv(service.all_runs()).split("\n")
    assert [line.split(",")[0] for line in lines[1:]] == ["1", "2"]
    assert lines[2].split(",")[6] == "30.5"
    assert lines[1].split(",")[7] == ""


def test_runs_dataframe_columns(service):
    service.create_run(25)
    df = runs_dataframe(service.all_runs())
    assert list(df.columns) == CSV_COLUMNS
    assert df.loc[0, "mixId"] == "MIX-001"
