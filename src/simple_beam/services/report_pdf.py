# path: src/simple_beam/services/report_pdf.py
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Tuple

from reportlab.lib import colors, pagesizes
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Image, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from simple_beam.domain.beam import BeamSpec
from simple_beam.domain.loads import AngledLoad, Load, MomentLoad, PointLoad, UDLLoad, UVLLoad
from simple_beam.domain.results import (
    AnalysisResult, HorizontalReaction, MomentReaction, VerticalReaction,
)
from simple_beam.domain.supports import Fixed, PinRoller, SupportSpec

# Nota: este módulo NO depende de matplotlib. Acepta paths a imágenes ya generadas
# (diagramas V y M) y el resultado del motor ya en unidades del usuario.


@dataclass(frozen=True)
class ReportHeader:
    titulo: str = "Análisis de viga"
    proyecto: str = ""
    autor: str = ""
    fecha: Optional[datetime] = None


def describe_support(support: SupportSpec, units_length: str) -> str:
    if isinstance(support, PinRoller):
        return f"Pin en x={_f(support.pin_x, 3)} {units_length}; roller en x={_f(support.roller_x, 3)} {units_length}"
    if isinstance(support, Fixed):
        return "Empotramiento izquierdo (x=0)" if support.side != "right" else "Empotramiento derecho (x=L)"
    return repr(support)


def describe_load(load: Load, lu: str, fu: str) -> Tuple[str, str, str]:
    """(label, tipo, detalle)"""
    if isinstance(load, PointLoad):
        return load.label, "Puntual", f"x={_f(load.x, 3)} {lu}; P={_f(load.P, 3)} {fu}"
    if isinstance(load, AngledLoad):
        return load.label, "Inclinada", f"x={_f(load.x, 3)} {lu}; P={_f(load.P, 3)} {fu}; θ={_f(load.theta_deg, 1)}°"
    if isinstance(load, UDLLoad):
        return load.label, "Uniforme", f"[{_f(load.a, 3)}, {_f(load.b, 3)}] {lu}; w={_f(load.w, 3)} {fu}/{lu}"
    if isinstance(load, UVLLoad):
        return load.label, "Lineal", (
            f"[{_f(load.a, 3)}, {_f(load.b, 3)}] {lu}; w1={_f(load.w1, 3)}, w2={_f(load.w2, 3)} {fu}/{lu}"
        )
    if isinstance(load, MomentLoad):
        return load.label, "Momento", f"x={_f(load.x, 3)} {lu}; M={_f(load.M, 3)} {fu}·{lu}"
    return getattr(load, "label", "?"), type(load).__name__, "-"


def reaction_rows(result: AnalysisResult, lu: str, fu: str) -> List[List[str]]:
    rows = [["Apoyo", "Tipo", "x", "Valor"]]
    for r in result.reactions:
        if isinstance(r, VerticalReaction):
            rows.append([r.at, "Vertical (R)", f"{_f(r.x, 3)} {lu}", f"{_f(r.R, 3)} {fu}"])
        elif isinstance(r, MomentReaction):
            rows.append([r.at, "Momento (M)", f"{_f(r.x, 3)} {lu}", f"{_f(r.M, 3)} {fu}·{lu}"])
        elif isinstance(r, HorizontalReaction):
            rows.append([r.at, "Horizontal (H)", "-", f"{_f(r.H, 3)} {fu}"])
    return rows


def extrema_rows(result: AnalysisResult, lu: str, fu: str) -> List[List[str]]:
    e = result.extrema
    return [
        ["Magnitud", "Valor", "x"],
        ["V máx", f"{_f(e.Vmax, 3)} {fu}", f"{_f(e.Vmax_pos, 3)} {lu}"],
        ["V mín", f"{_f(e.Vmin, 3)} {fu}", f"{_f(e.Vmin_pos, 3)} {lu}"],
        ["M máx", f"{_f(e.Mmax, 3)} {fu}·{lu}", f"{_f(e.Mmax_pos, 3)} {lu}"],
        ["M mín", f"{_f(e.Mmin, 3)} {fu}·{lu}", f"{_f(e.Mmin_pos, 3)} {lu}"],
    ]


def export_analysis_pdf(
    out_pdf_path: str,
    beam: BeamSpec,
    support: SupportSpec,
    loads: Iterable[Load],
    result: AnalysisResult,
    header: Optional[ReportHeader] = None,
    imagenes: Optional[Dict[str, str]] = None,
    page_size=pagesizes.A4,
) -> None:
    """
    Genera el reporte de resultados en PDF (A4): datos, cargas, reacciones, extremos y figuras.
    imagenes: {"v": path_png, "m": path_png} (opcional).
    """
    header = header or ReportHeader()
    imgs = _normalize_images_dict(imagenes)
    lu, fu = beam.units.length, beam.units.force

    styles = getSampleStyleSheet()
    styles.add(ParagraphStyle(name="H1c", parent=styles["Heading1"], alignment=TA_CENTER))
    styles.add(ParagraphStyle(name="Small", parent=styles["BodyText"], fontSize=9, leading=11))

    doc = SimpleDocTemplate(
        out_pdf_path,
        pagesize=page_size,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=header.titulo,
    )

    story: List[object] = []

    # ----------------- Encabezado -----------------
    story.append(Paragraph(header.titulo, styles["H1c"]))
    story.append(Spacer(1, 4 * mm))

    fecha = header.fecha or datetime.now()
    meta_rows = [
        ["Proyecto:", header.proyecto or "-"],
        ["Autor:", header.autor or "-"],
        ["Fecha:", fecha.strftime("%Y-%m-%d %H:%M")],
        ["Unidades:", beam.units.label],
    ]
    t = Table(meta_rows, colWidths=[40 * mm, 140 * mm])
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 6 * mm))

    # ----------------- Datos -----------------
    story.append(Paragraph("Datos de la viga", styles["Heading2"]))
    t = Table(
        [
            [f"Longitud [{lu}]", _f(beam.length, 3)],
            ["Apoyos", describe_support(support, lu)],
        ],
        colWidths=[55 * mm, 125 * mm],
    )
    t.setStyle(_kv_table_style())
    story.append(t)
    story.append(Spacer(1, 3 * mm))

    load_rows = [["Carga", "Tipo", "Detalle"]] + [list(describe_load(ld, lu, fu)) for ld in loads]
    story.append(Paragraph("Cargas aplicadas", styles["Heading3"]))
    if len(load_rows) > 1:
        t = Table(load_rows, colWidths=[25 * mm, 30 * mm, 125 * mm])
        t.setStyle(_grid_table_style(header_rows=1))
        story.append(t)
    else:
        story.append(Paragraph("(Sin cargas)", styles["Small"]))
    story.append(Spacer(1, 4 * mm))

    # ----------------- Resultados -----------------
    story.append(Paragraph("Resultados", styles["Heading2"]))
    if not result.is_valid:
        story.append(Paragraph(f"Análisis inválido: {result.error or '-'}", styles["BodyText"]))
        doc.build(story)
        return

    t = Table(reaction_rows(result, lu, fu), colWidths=[30 * mm, 45 * mm, 45 * mm, 60 * mm])
    t.setStyle(_grid_table_style(header_rows=1))
    story.append(Paragraph("Reacciones", styles["Heading3"]))
    story.append(t)
    story.append(Spacer(1, 3 * mm))

    t = Table(extrema_rows(result, lu, fu), colWidths=[40 * mm, 70 * mm, 70 * mm])
    t.setStyle(_grid_table_style(header_rows=1))
    story.append(Paragraph("Extremos globales", styles["Heading3"]))
    story.append(t)
    story.append(Spacer(1, 3 * mm))

    if result.notes:
        story.append(Paragraph("Notas", styles["Heading3"]))
        for n in result.notes:
            story.append(Paragraph(f"• {n}", styles["Small"]))
        story.append(Spacer(1, 3 * mm))

    # ----------------- Figuras -----------------
    if imgs:
        story.append(Paragraph("Figuras", styles["Heading2"]))
        _append_figure(story, styles, "v", "Diagrama de corte V(x)", imgs, max_w=180 * mm, max_h=95 * mm)
        _append_figure(story, styles, "m", "Diagrama de momento M(x)", imgs, max_w=180 * mm, max_h=95 * mm)

    doc.build(story)


# ----------------- helpers -----------------

def _normalize_images_dict(imagenes: Optional[Dict[str, str]]) -> Dict[str, str]:
    if not imagenes:
        return {}
    out: Dict[str, str] = {}
    for k, v in imagenes.items():
        kk = (k or "").strip().lower()
        vv = (v or "").strip()
        if not kk or not vv:
            continue
        out[kk] = vv
    return out


def _append_figure(story: List[object], styles, key: str, title: str, imgs: Dict[str, str], *, max_w: float, max_h: float):
    story.append(Paragraph(title, styles["Heading3"]))
    path = (imgs.get(key) or "").strip()
    if path and os.path.exists(path):
        story.append(_img(path, max_w=max_w, max_h=max_h))
    else:
        story.append(Paragraph(f"(Sin imagen: '{key}' no disponible o no existe en disco)", styles["Small"]))
    story.append(Spacer(1, 3 * mm))


def _f(v: float, dec: int) -> str:
    s = f"{float(v):.{dec}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    if s == "-0":
        s = "0"
    return s


def _kv_table_style():
    return TableStyle(
        [
            ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), 10),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
            ("BACKGROUND", (0, 0), (0, -1), colors.whitesmoke),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), 6),
            ("RIGHTPADDING", (0, 0), (-1, -1), 6),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]
    )


def _grid_table_style(header_rows: int = 1, font_size: int = 9):
    ts = [
        ("FONTNAME", (0, 0), (-1, -1), "Helvetica"),
        ("FONTSIZE", (0, 0), (-1, -1), font_size),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("LEFTPADDING", (0, 0), (-1, -1), 4),
        ("RIGHTPADDING", (0, 0), (-1, -1), 4),
        ("TOPPADDING", (0, 0), (-1, -1), 3),
        ("BOTTOMPADDING", (0, 0), (-1, -1), 3),
    ]
    if header_rows > 0:
        ts += [
            ("BACKGROUND", (0, 0), (-1, header_rows - 1), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, header_rows - 1), "Helvetica-Bold"),
        ]
    return TableStyle(ts)


def _img(path: str, *, max_w: float, max_h: float):
    img = Image(path)
    iw, ih = img.imageWidth, img.imageHeight
    if iw <= 0 or ih <= 0:
        return img
    scale = min(max_w / iw, max_h / ih, 1.0)
    img.drawWidth = iw * scale
    img.drawHeight = ih * scale
    return img
