from girder_rebar.core.optimizer import design_girder
from girder_rebar.models.inputs import BridgeGeometry
from girder_rebar.reports.pdf_generator import PDFReportGenerator


class TestPDFReport:

    def test_feasible_report(self, geometry_400x800):
        design = design_girder(geometry_400x800, 200_000)
        pdf = PDFReportGenerator().generate_report(
            geometry_400x800, design, project_name="Test Bridge", engineer_name="QA"
        )
        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 1000

    def test_infeasible_report(self):
        geometry = BridgeGeometry.from_user_units(10000, 60, 500, 1.8, 2000)
        design = design_girder(geometry, 100_000)
        pdf = PDFReportGenerator(currency="USD").generate_report(geometry, design)
        assert pdf.startswith(b"%PDF")
