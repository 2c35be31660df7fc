"""Date-range analysis report, exported as PDF or spreadsheet."""
from datetime import date
from xml.sax.saxutils import escape

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .stats import per_class_range_breakdown, range_stats, sorted_relief_list

REPORT_TITLE = "Laporan Analisis Keberadaan Guru - MMI"
SUMMARY_HEADING = "1. Ringkasan Peratusan Kehadiran (Sesi Pengajaran)"
CLASS_HEADING = "2. Analisis Terperinci Mengikut Kelas"
RELIEF_HEADING = "3. Senarai Rekod Guru Ganti (Terperinci)"
NO_RELIEF_TEXT = "Tiada rekod guru ganti dalam tempoh ini."

SUMMARY_HEADER = ['Kategori', 'Jumlah Sesi', 'Peratusan (%)']
CLASS_HEADER = ['Kelas', 'Jumlah Sesi', 'Guru Subjek', 'Guru Ganti', '% Kehadiran Subjek']
RELIEF_HEADER = ["No.", "Tarikh", "Masa", "Kelas", "GURU GANTI", "GURU TIDAK HADIR", "Sebab", "Catatan"]


def report_filename(start_date, end_date, ext):
    return f"Laporan_Analisis_MMI_{start_date}_{end_date}.{ext}"


def summary_rows(start_date, end_date, records):
    stats = range_stats(start_date, end_date, records)
    return [
        ['Hadir (Guru Matapelajaran)', stats['subject_count'], f"{stats['subject_pct']}%"],
        ['Tidak Hadir (Diganti oleh Guru Ganti)', stats['relief_count'], f"{stats['relief_pct']}%"],
        ['JUMLAH KESELURUHAN', stats['total'], '100%'],
    ]


def class_rows(start_date, end_date, records):
    return [
        [row['class_name'], row['total'], row['subject_count'], row['relief_count'], f"{row['subject_pct']}%"]
        for row in per_class_range_breakdown(start_date, end_date, records)
    ]


def relief_rows(start_date, end_date, records):
    return [
        [
            seq,
            r.date,
            f"{r.start_time} - {r.end_time}",
            r.class_name,
            r.teacher_name,
            r.original_teacher_name or '-',
            r.relief_reason or '-',
            r.notes or '-',
        ]
        for seq, r in sorted_relief_list(start_date, end_date, records)
    ]


def _table(header, rows, head_color, col_widths=None, zebra=None, font_size=10):
    t = Table([header] + rows, colWidths=col_widths, repeatRows=1)
    style = [
        ('BACKGROUND', (0, 0), (-1, 0), head_color),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), font_size),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.HexColor('#CBD5E1')),
        ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ('TOPPADDING', (0, 0), (-1, -1), 4),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
    ]
    if zebra is not None:
        for i in range(2, len(rows) + 1, 2):
            style.append(('BACKGROUND', (0, i), (-1, i), zebra))
    t.setStyle(TableStyle(style))
    return t


def write_pdf(out, start_date, end_date, records):
    """Render the three report sections as a landscape A4 document into ``out``."""
    styles = getSampleStyleSheet()
    cell = styles['BodyText'].clone('cell', fontSize=8, leading=10)
    doc = SimpleDocTemplate(
        out,
        pagesize=landscape(A4),
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=14 * mm,
        bottomMargin=14 * mm,
        title=f"{REPORT_TITLE} {start_date} - {end_date}",
    )
    story = [
        Paragraph(REPORT_TITLE, styles['Title']),
        Paragraph(f"Tempoh Laporan: {start_date} hingga {end_date}", styles['Normal']),
        Paragraph(f"Dijana pada: {date.today().isoformat()}", styles['Normal']),
        Spacer(1, 8 * mm),
        Paragraph(SUMMARY_HEADING, styles['Heading2']),
        _table(SUMMARY_HEADER, summary_rows(start_date, end_date, records), colors.HexColor('#3B82F6'),
               zebra=colors.HexColor('#EFF6FF'), font_size=11),
        Spacer(1, 8 * mm),
        Paragraph(CLASS_HEADING, styles['Heading2']),
        _table(CLASS_HEADER, class_rows(start_date, end_date, records), colors.HexColor('#475569')),
        PageBreak(),
        Paragraph(RELIEF_HEADING, styles['Heading2']),
    ]
    rows = relief_rows(start_date, end_date, records)
    if rows:
        # Wrap the free-text columns so long names and notes stay inside the page
        wrapped = [row[:4] + [Paragraph(escape(str(v)), cell) for v in row[4:]] for row in rows]
        story.append(_table(
            RELIEF_HEADER, wrapped, colors.HexColor('#EA580C'),
            col_widths=[12 * mm, 24 * mm, 28 * mm, 22 * mm, 50 * mm, 50 * mm, 40 * mm, 43 * mm],
            zebra=colors.HexColor('#FFF7ED'), font_size=9,
        ))
    else:
        story.append(Paragraph(NO_RELIEF_TEXT, styles['Normal']))
    doc.build(story)
    return out


def _write_sheet(ws, header, rows, fill_color):
    fill = PatternFill(start_color=fill_color, end_color=fill_color, fill_type='solid')
    for c, h in enumerate(header, 1):
        cell = ws.cell(row=1, column=c, value=h)
        cell.font = Font(bold=True, color='FFFFFF')
        cell.fill = fill
        cell.alignment = Alignment(horizontal='center')
    for r, values in enumerate(rows, 2):
        for c, v in enumerate(values, 1):
            ws.cell(row=r, column=c, value=v)
    # Auto width (simple heuristic)
    for column_cells in ws.columns:
        length = max(len(str(cell.value)) if cell.value is not None else 0 for cell in column_cells)
        ws.column_dimensions[column_cells[0].column_letter].width = max(10, min(40, length + 2))


def write_workbook(out, start_date, end_date, records):
    wb = Workbook()
    ws = wb.active
    ws.title = 'Ringkasan'
    _write_sheet(ws, SUMMARY_HEADER, summary_rows(start_date, end_date, records), '3B82F6')
    _write_sheet(wb.create_sheet('Kelas'), CLASS_HEADER, class_rows(start_date, end_date, records), '475569')
    _write_sheet(wb.create_sheet('Guru Ganti'), RELIEF_HEADER, relief_rows(start_date, end_date, records), 'EA580C')
    wb.save(out)
    return out
