"""
No Dues certificate rendering.

Both renderers are pure functions of ``CertificateData``. The HTML version is
the on-screen preview and goes through the browser's own print/PDF path; the
PDF version draws the same layout with reportlab for direct download.
"""

from html import escape
from io import BytesIO
from typing import List, Optional

import structlog
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas

from . import config
from .schemas import CertificateData, EmployeeRecord
from .utils import data_url_to_bytes

logger = structlog.get_logger()

TITLE = "NO DUES CERTIFICATE"
SETTLEMENT_TEXT = (
    "All salary, incentives, and other settlements for the above period have been "
    "cleared as per centre records"
)
PURPOSE_TEXT = (
    "This certificate is being issued on the request of the faculty for official "
    "and record purposes."
)


def _certify_text(record: EmployeeRecord) -> str:
    return (
        f"This is to certify that {record.name}, {record.designation}, {record.division}, "
        f"Educator ID {record.educator_id}, {record.centre_name}, has no financial or "
        f"material dues pending towards the centre for the period {record.period_start} "
        f"to {record.period_end}."
    )


def _address_lines(record: EmployeeRecord) -> List[str]:
    return [
        f"{record.centre_name}-{config.CENTRE_LOCALITY},",
        f"{config.CENTRE_AREA}, {record.place} {config.CENTRE_PIN}",
        f"Email: {config.CENTRE_EMAIL}",
    ]


_STYLE = """
  @page { size: A4; margin: 0; }
  body { margin: 0; font-family: Georgia, 'Times New Roman', serif; font-size: 12pt; color: #000; }
  .watermark { position: fixed; inset: 0; display: flex; align-items: center; justify-content: center;
               opacity: 0.1; pointer-events: none; z-index: 0; }
  .watermark div { width: 500px; height: 500px; transform: rotate(-45deg); background-size: contain;
                   background-repeat: no-repeat; background-position: center; }
  .page { position: relative; z-index: 1; padding: 48px; min-height: 1000px; border: 1px solid #2563eb;
          margin: 16px; line-height: 1.6; }
  header { display: flex; justify-content: space-between; align-items: flex-start;
           border-bottom: 2px solid #1d4ed8; padding-bottom: 16px; margin-bottom: 32px; }
  header .logo { height: 48px; width: auto; }
  header .logo-fallback { font-family: sans-serif; font-size: 28px; font-weight: bold; color: #3b82f6; }
  header address { font-style: normal; text-align: right; font-family: sans-serif; font-size: 10pt; color: #374151; }
  header address p { margin: 0; }
  h1 { text-align: center; font-size: 16pt; letter-spacing: 0.05em; margin: 16px 0 48px; }
  .body p { text-align: justify; margin: 0 0 32px; }
  .body .date { display: block; text-align: right; margin-top: 16px; }
  footer { margin-top: 64px; }
  footer .line { display: inline-block; border-bottom: 1px solid #000; width: 192px; position: relative; }
  footer .signature { position: absolute; top: -32px; left: 16px; height: 48px; opacity: 0.9; }
  footer .stamp { position: absolute; top: -48px; left: 32px; height: 80px; width: 80px; opacity: 0.8;
                  transform: rotate(-12deg); }
"""


def render_certificate_html(data: CertificateData) -> str:
    record, assets = data.record, data.assets
    e = escape

    if assets.logo_url:
        logo = f'<img src="{e(assets.logo_url)}" alt="Logo" class="logo" />'
    else:
        logo = f'<span class="logo-fallback">{e(config.ORG_NAME.lower())}</span>'

    address = "\n".join(f"      <p>{e(line)}</p>" for line in _address_lines(record))

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>{TITLE} - {e(record.educator_id)}</title>
<style>{_STYLE}</style>
</head>
<body>
  <div class="watermark"><div style="background-image: url('{e(assets.watermark_url)}');"></div></div>
  <div class="page">
    <header>
      <div>{logo}</div>
      <address>
{address}
      </address>
    </header>
    <h1>{TITLE}</h1>
    <section class="body">
      <p>This is to certify that <strong>{e(record.name)}</strong>, {e(record.designation)}, {e(record.division)},
        Educator ID <strong>{e(record.educator_id)}</strong>, {e(record.centre_name)}, has no financial or
        material dues pending towards the centre for the period <strong>{e(record.period_start)}</strong>
        to <strong>{e(record.period_end)}</strong>.</p>
      <p>{SETTLEMENT_TEXT}</p>
      <p>{PURPOSE_TEXT}<span class="date">Date: {e(record.issue_date)}</span></p>
    </section>
    <footer>
      <p>Place: {e(record.place)}</p>
      <p>Signature: <span class="line"><img src="{e(assets.signature_url)}" alt="Signature" class="signature" /></span></p>
      <p>Name: {e(record.signatory_name)}</p>
      <p>Designation: {e(record.signatory_designation)}</p>
      <p>{e(config.ORG_NAME)} {e(record.place)} Stamp: <span class="line"><img src="{e(assets.stamp_url)}" alt="Stamp" class="stamp" /></span></p>
    </footer>
  </div>
</body>
</html>
"""


def _image(url: str) -> Optional[ImageReader]:
    # only embedded uploads; remote URLs are left to the HTML preview
    if not url.startswith("data:"):
        if url:
            logger.info("certificate_image_skipped", url=url[:64], reason="not a data URL")
        return None
    try:
        reader = ImageReader(BytesIO(data_url_to_bytes(url)))
        reader.getSize()
        return reader
    except (OSError, ValueError) as exc:
        logger.info("certificate_image_skipped", url=url[:64], error=str(exc))
        return None


def _draw_paragraph(c: canvas.Canvas, text: str, x: float, y: float, width: float, leading: float = 16) -> float:
    for line in simpleSplit(text, "Times-Roman", 12, width):
        c.drawString(x, y, line)
        y -= leading
    return y


def render_certificate_pdf(data: CertificateData) -> bytes:
    record, assets = data.record, data.assets
    width, height = A4
    margin = 54
    text_width = width - 2 * margin

    buf = BytesIO()
    c = canvas.Canvas(buf, pagesize=A4)
    c.setTitle(f"{TITLE} - {record.educator_id}")

    watermark = _image(assets.watermark_url)
    if watermark:
        size = 360
        c.drawImage(watermark, (width - size) / 2, (height - size) / 2, width=size, height=size,
                    mask="auto", preserveAspectRatio=True)

    c.setStrokeColorRGB(0.15, 0.39, 0.92)
    c.rect(12, 12, width - 24, height - 24, stroke=1, fill=0)

    # header
    top = height - margin
    logo = _image(assets.logo_url)
    if logo:
        c.drawImage(logo, margin, top - 36, width=160, height=36, mask="auto", preserveAspectRatio=True, anchor="w")
    else:
        c.setFillColorRGB(0.23, 0.51, 0.96)
        c.setFont("Helvetica-Bold", 22)
        c.drawString(margin, top - 26, config.ORG_NAME.lower())
        c.setFillColorRGB(0, 0, 0)
    c.setFont("Helvetica", 9)
    y = top - 8
    for line in _address_lines(record):
        c.drawRightString(width - margin, y, line)
        y -= 12
    c.setLineWidth(2)
    c.line(margin, top - 48, width - margin, top - 48)
    c.setLineWidth(1)
    c.setStrokeColorRGB(0, 0, 0)

    c.setFont("Helvetica-Bold", 16)
    c.drawCentredString(width / 2, top - 96, TITLE)

    c.setFont("Times-Roman", 12)
    y = top - 140
    y = _draw_paragraph(c, _certify_text(record), margin, y, text_width) - 16
    y = _draw_paragraph(c, SETTLEMENT_TEXT, margin, y, text_width) - 16
    y = _draw_paragraph(c, PURPOSE_TEXT, margin, y, text_width) - 8
    c.drawRightString(width - margin, y, f"Date: {record.issue_date}")

    # footer
    y = 260
    c.drawString(margin, y, f"Place: {record.place}")
    y -= 48
    c.drawString(margin, y, "Signature:")
    c.line(margin + 64, y - 2, margin + 256, y - 2)
    signature = _image(assets.signature_url)
    if signature:
        c.drawImage(signature, margin + 80, y - 4, width=140, height=40, mask="auto", preserveAspectRatio=True)
    y -= 36
    c.drawString(margin, y, f"Name: {record.signatory_name}")
    y -= 18
    c.drawString(margin, y, f"Designation: {record.signatory_designation}")
    y -= 48
    label = f"{config.ORG_NAME} {record.place} Stamp:"
    c.drawString(margin, y, label)
    label_end = margin + c.stringWidth(label, "Times-Roman", 12) + 8
    c.line(label_end, y - 2, label_end + 192, y - 2)
    stamp = _image(assets.stamp_url)
    if stamp:
        c.saveState()
        c.translate(label_end + 40, y - 12)
        c.rotate(12)
        c.drawImage(stamp, 0, 0, width=72, height=72, mask="auto", preserveAspectRatio=True)
        c.restoreState()

    c.showPage()
    c.save()
    return buf.getvalue()
