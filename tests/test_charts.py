"""Tests for chart data and chart definitions."""

import math

import altair as alt
import pytest

from panels.charts import (
    PERIOD_COLORS,
    comparison_chart,
    comparison_frame,
    export_frame,
    progress_chart,
    progress_frame,
)
from scopes.metrics import compute_metrics
from scopes.models import DEFAULT_CURRENT, DEFAULT_PREVIOUS, MeasurementSet


@pytest.fixture
def frame():
    return comparison_frame(DEFAULT_PREVIOUS, DEFAULT_CURRENT)


class TestComparisonFrame:
    """Tests for comparison_frame()."""

    def test_one_row_per_scope(self, frame):
        assert list(frame.columns) == ["Scope", "Previous Year", "Current Year"]
        assert list(frame["Scope"]) == ["Scope 1", "Scope 2", "Scope 3"]
        assert list(frame["Previous Year"]) == [12000.0, 8000.0, 25000.0]
        assert list(frame["Current Year"]) == [11000.0, 7500.0, 26000.0]


class TestComparisonChart:
    """Tests for comparison_chart()."""

    def test_grouped_bars(self, frame):
        chart = comparison_chart(frame)
        vega = chart.to_dict()

        assert isinstance(chart, alt.Chart)
        assert vega["mark"]["type"] == "bar"
        assert vega["encoding"]["x"]["field"] == "Scope"
        assert vega["encoding"]["xOffset"]["field"] == "Period"
        assert vega["encoding"]["y"]["field"] == "Emissions"
        assert vega["encoding"]["color"]["scale"]["range"] == PERIOD_COLORS

    def test_long_format_data(self, frame):
        data = comparison_chart(frame).data

        assert len(data) == 6
        assert set(data["Period"]) == {"Previous Year", "Current Year"}
        assert data["Emissions"].sum() == 45000 + 44500


class TestExportFrame:
    """Tests for export_frame()."""

    def test_adds_totals_and_changes(self):
        metrics = compute_metrics(DEFAULT_PREVIOUS, DEFAULT_CURRENT, 10.0)
        df = export_frame(metrics, DEFAULT_PREVIOUS, DEFAULT_CURRENT)

        assert list(df["Scope"]) == ["Scope 1", "Scope 2", "Scope 3", "Total"]
        total = df.iloc[-1]
        assert total["Previous Year"] == 45000
        assert total["Current Year"] == 44500
        assert total["Change (%)"] == pytest.approx(-1.111, rel=1e-3)
        assert df.iloc[2]["Change (%)"] == pytest.approx(4.0)

    def test_infinite_change_survives_csv(self):
        metrics = compute_metrics(MeasurementSet(), MeasurementSet(1, 0, 0), 10.0)
        df = export_frame(metrics, MeasurementSet(), MeasurementSet(1, 0, 0))

        assert math.isinf(df.iloc[0]["Change (%)"])
        assert "inf" in df.to_csv(index=False)


class TestProgress:
    """Tests for the progress gauge."""

    @pytest.mark.parametrize("progress", [0.0, 11.1, 100.0])
    def test_segments_sum_to_100(self, progress):
        df = progress_frame(progress)

        assert list(df["Segment"]) == ["Achieved", "Remaining"]
        assert df["Percent"].iloc[0] == pytest.approx(progress)
        assert df["Percent"].sum() == pytest.approx(100.0)

    def test_out_of_range_is_clamped(self):
        assert list(progress_frame(150.0)["Percent"]) == [100.0, 0.0]
        assert list(progress_frame(-5.0)["Percent"]) == [0.0, 100.0]

    def test_gauge_layers(self):
        chart = progress_chart(11.1)
        vega = chart.to_dict()

        assert isinstance(chart, alt.LayerChart)
        marks = [layer["mark"]["type"] for layer in vega["layer"]]
        assert marks == ["arc", "text"]
        assert chart.layer[1].data["label"][0] == "11%"
