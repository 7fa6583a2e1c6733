"""Tests for CSV export and the text report."""

from datetime import date

from swimlog.services.export import CSV_HEADERS, export_to_csv, generate_performance_report


class TestExportToCsv:
    """Tests for CSV rendering."""

    def test_header_only_when_empty(self):
        assert export_to_csv([]) == ",".join(CSV_HEADERS)

    def test_row_format(self, make_entry):
        csv_text = export_to_csv([make_entry("01:02.45", notes="Strong finish")])
        header, row = csv_text.split("\n")

        assert header == "Date,Swimmer,Stroke,Distance (m),Time,Test Set,Notes"
        assert row == '2025-01-14,"John Doe",Freestyle,100,01:02.45,"Time Trial","Strong finish"'

    def test_embedded_quotes_are_doubled(self, make_entry):
        csv_text = export_to_csv([make_entry("01:02.45", notes='Coach said "nice"')])
        assert csv_text.endswith('"Coach said ""nice"""')

    def test_missing_notes(self, make_entry):
        csv_text = export_to_csv([make_entry("01:02.45")])
        assert csv_text.endswith(',""')


class TestGeneratePerformanceReport:
    """Tests for the plain-text report."""

    def test_single_swimmer(self, history):
        report = generate_performance_report(history, "John Doe", today=date(2025, 1, 20))
        lines = report.split("\n")

        assert lines[0] == "Swimming Performance Report"
        assert lines[1] == "Generated: 2025-01-20"
        assert "Swimmer: John Doe" in lines
        assert "Total Times Recorded: 4" in lines
        assert "Strokes: Freestyle" in lines
        assert "Distances: 100m, 50m" in lines
        assert "100m Freestyle - 01:02.45" in lines
        assert "50m Freestyle - 00:28.67" in lines
        assert "2025-01-16 - John Doe - 100m Freestyle - 01:02.45 (Time Trial)" in lines
        assert "Jane Smith" not in report

    def test_all_swimmers(self, history):
        report = generate_performance_report(history, today=date(2025, 1, 20))

        assert "Swimmer:" not in report
        assert "Total Times Recorded: 5" in report
        assert "Strokes: Freestyle, Backstroke" in report
        assert "200m Backstroke - 02:25.12" in report

    def test_detailed_times_follow_input_order(self, history):
        report = generate_performance_report(history, today=date(2025, 1, 20))
        detailed = report.split("Detailed Times:\n")[1].split("\n")

        assert len(detailed) == 5
        assert detailed[-1].endswith("01:03.10 (Time Trial)")

    def test_empty(self):
        report = generate_performance_report([], today=date(2025, 1, 20))

        assert "Total Times Recorded: 0" in report
        assert "Personal Bests:" not in report
        assert report.endswith("Detailed Times:")
