"""
PDF report generator using ReportLab.
"""

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import (
    SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle, Image
)
from datetime import datetime
from typing import Optional
import io

from girder_rebar.models.inputs import BridgeGeometry
from girder_rebar.models.outputs import RebarDesign
from girder_rebar.reports.diagrams.cross_section import generate_cross_section


class PDFReportGenerator:
    """
    Generate PDF design reports using ReportLab.
    """

    def __init__(self, currency: str = "Yuan"):
        self.currency = currency
        self.styles = getSampleStyleSheet()
        self._setup_custom_styles()

    def _setup_custom_styles(self):
        """Set up custom paragraph styles."""
        self.styles.add(ParagraphStyle(
            name='TitleStyle',
            parent=self.styles['Title'],
            fontSize=18,
            spaceAfter=20,
            textColor=colors.HexColor('#2c3e50')
        ))

        self.styles.add(ParagraphStyle(
            name='SectionHeader',
            parent=self.styles['Heading2'],
            fontSize=13,
            spaceBefore=16,
            spaceAfter=8,
            textColor=colors.HexColor('#34495e'),
        ))

    def generate_report(
        self,
        geometry: BridgeGeometry,
        design: RebarDesign,
        project_name: str = "RC Girder Reinforcement",
        engineer_name: Optional[str] = None,
    ) -> bytes:
        """
        Generate complete PDF report.

        Args:
            geometry: Girder geometry used for the design
            design: Design result
            project_name: Project name for report header
            engineer_name: Engineer name (optional)

        Returns:
            PDF file content as bytes
        """
        buffer = io.BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=2*cm,
            leftMargin=2*cm,
            topMargin=2*cm,
            bottomMargin=2*cm
        )

        story = []
        story.extend(self._build_header(project_name, design, engineer_name))
        story.extend(self._build_input_section(geometry))

        if design.design_possible:
            story.extend(self._build_design_section(design))
            story.extend(self._build_cost_section(design))
            story.extend(self._build_candidate_section(design))
            story.extend(self._build_diagram(geometry, design))
        else:
            story.append(Paragraph(
                '<font color="#e74c3c"><b>DESIGN FAILED</b></font>',
                self.styles['SectionHeader']
            ))
            for line in design.error_message.splitlines():
                story.append(Paragraph(line, self.styles['BodyText']))

        doc.build(story)

        buffer.seek(0)
        return buffer.getvalue()

    def _build_header(self, project_name, design, engineer_name):
        elements = []
        elements.append(Paragraph("GIRDER REINFORCEMENT DESIGN REPORT", self.styles['TitleStyle']))
        elements.append(Paragraph(f"<b>{project_name}</b>", self.styles['Heading2']))

        status = "DESIGN FOUND" if design.design_possible else "NO FEASIBLE DESIGN"
        status_color = '#27ae60' if design.design_possible else '#e74c3c'
        elements.append(Paragraph(
            f'<font color="{status_color}"><b>STATUS: {status}</b></font>',
            self.styles['Heading3']
        ))

        meta_data = [
            ['Report Date', datetime.now().strftime('%Y-%m-%d %H:%M')],
            ['Engineer', engineer_name or 'Not specified'],
        ]
        meta_table = Table(meta_data, colWidths=[3*cm, 6*cm])
        meta_table.setStyle(TableStyle([
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
        ]))
        elements.append(meta_table)
        elements.append(Spacer(1, 10))
        return elements

    def _build_input_section(self, geometry):
        elements = [Paragraph("1. INPUT DATA", self.styles['SectionHeader'])]
        data = [
            ['Parameter', 'Value', 'Unit'],
            ['Span', f'{geometry.span:,.0f}', 'mm'],
            ['Width', f'{geometry.width:.0f}', 'mm'],
            ['Height', f'{geometry.height:.0f}', 'mm'],
            ['Wheel Span', f'{geometry.wheel_span:,.0f}', 'mm'],
            ['Girder Spacing', f'{geometry.girder_spacing:,.0f}', 'mm'],
        ]
        elements.append(self._create_data_table(data))
        return elements

    def _build_design_section(self, design):
        elements = [Paragraph("2. DESIGN RESULTS", self.styles['SectionHeader'])]
        d = design.flexure_rebar_diameter
        data = [
            ['Parameter', 'Value', 'Unit'],
            ['Max Moment', f'{design.max_moment / 1e6:,.1f}', 'kNm'],
            ['Max Shear', f'{design.max_shear / 1e3:,.1f}', 'kN'],
            ['Bar Diameter', f'{d:.0f}', 'mm'],
            ['Rows', str(design.rebar_rows), '-'],
            ['Bars Row 1 / Row 2', f'{design.rebar_count_row1} / {design.rebar_count_row2}', '-'],
            ['Effective Depth h0', f'{design.effective_depth:.1f}', 'mm'],
            ['xi = x / h0', f'{design.xi:.3f}', '-'],
            ['Stirrups', f'{design.stirrup_legs}L-d{design.stirrup_diameter:.0f}', '-'],
            ['Stirrup Spacing', f'{design.stirrup_spacing:.0f}', 'mm'],
            ['Bent Bars', str(design.bent_rebar_count) if design.bent_rebars_used else 'None', '-'],
        ]
        elements.append(self._create_data_table(data))
        return elements

    def _build_cost_section(self, design):
        elements = [Paragraph("3. COST ESTIMATE", self.styles['SectionHeader'])]
        data = [
            ['Item', 'Cost', 'Unit'],
            ['Concrete', f'{design.concrete_cost:,.2f}', self.currency],
            ['Steel', f'{design.steel_cost:,.2f}', self.currency],
            ['Labour', f'{design.labor_cost:,.2f}', self.currency],
            ['Total', f'{design.total_cost:,.2f}', self.currency],
        ]
        elements.append(self._create_data_table(data))
        return elements

    def _build_candidate_section(self, design):
        elements = [Paragraph("4. CANDIDATE DIAMETERS", self.styles['SectionHeader'])]
        data = [['Diameter (mm)', 'Total Cost', 'Note']]
        for c in design.candidates:
            cost = f'{c.total_cost:,.2f}' if c.total_cost is not None else '-'
            note = 'Selected' if c.selected else ('Feasible' if c.feasible else 'Rejected')
            data.append([f'{c.diameter:.0f}', cost, note])
        elements.append(self._create_data_table(data))
        return elements

    def _build_diagram(self, geometry, design):
        png = generate_cross_section(geometry, design, return_figure=False)
        return [
            Paragraph("5. CROSS SECTION", self.styles['SectionHeader']),
            Image(io.BytesIO(png), width=10*cm, height=10*cm, kind='proportional'),
        ]

    def _create_data_table(self, data):
        """Create a formatted data table."""
        table = Table(data, colWidths=[5*cm, 4*cm, 2.5*cm])
        table.setStyle(TableStyle([
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#3498db')),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('ALIGN', (1, 0), (-1, -1), 'CENTER'),
            ('ALIGN', (0, 0), (0, -1), 'LEFT'),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
            ('GRID', (0, 0), (-1, -1), 0.5, colors.gray),
            ('ROWBACKGROUNDS', (0, 1), (-1, -1), [colors.white, colors.HexColor('#f8f9fa')]),
            ('TOPPADDING', (0, 0), (-1, -1), 5),
            ('BOTTOMPADDING', (0, 0), (-1, -1), 5),
        ]))
        return table
