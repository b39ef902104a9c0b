"""Admin preview of an email template.

The admin template editor posts the template being edited and receives
the rendered email, framed by a small header that shows the subject,
layout and the sample variables used for substitution.
"""

from __future__ import annotations

import base64
import html
import json
from typing import Any
from typing import Mapping

from pydantic import ValidationError as PydanticValidationError

from rsvp.api.schemas import PreviewRequestSchema
from rsvp.exceptions import AppError
from rsvp.exceptions import ValidationError
from rsvp.templates.data import get_sample_data
from rsvp.templates.renderer import interpolate_variables
from rsvp.templates.renderer import render_email_template
from rsvp.templates.types import EmailTemplate
from rsvp.templates.types import TemplateData
from rsvp.utils.logging import get_logger
from rsvp.utils.logging import set_request_context
from rsvp.utils.responses import error_response
from rsvp.utils.responses import html_response
from rsvp.utils.responses import json_response
from rsvp.utils.responses import validate_content_type

logger = get_logger(__name__)

PREVIEW_TITLES = {
    "confirmation": "Confirmation",
    "reminder": "Reminder",
}

PREVIEW_HTML = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <title>Email Preview - {title}</title>
    <style>
        body {{ margin: 0; padding: 20px; background: #f4f4f4; font-family: Arial, sans-serif; }}
        .preview-container {{ max-width: 600px; margin: 0 auto; background: white; padding: 20px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }}
        .preview-header {{ background: #f8f9fa; padding: 10px; margin: -20px -20px 20px; border-radius: 8px 8px 0 0; border-bottom: 1px solid #e9ecef; }}
        .preview-header h1 {{ margin: 0; font-size: 16px; color: #666; }}
        .preview-info {{ background: #e9ecef; padding: 10px; margin: -20px -20px 20px; font-size: 14px; color: #666; }}
        .preview-info code {{ background: #fff; padding: 2px 4px; border-radius: 4px; font-size: 12px; }}
    </style>
</head>
<body>
    <div class="preview-container">
        <div class="preview-header">
            <h1>Email Preview - {title}</h1>
        </div>
        <div class="preview-info">
            <p><strong>Subject:</strong> {subject}</p>
            <p><strong>Layout:</strong> {layout}</p>
            <p><strong>Sample Variables:</strong></p>
            <ul>{variables}</ul>
        </div>
        {email_html}
    </div>
</body>
</html>
"""


def render_preview(
    template: EmailTemplate,
    preview_type: str,
    data: TemplateData,
) -> str:
    """Render ``template`` with ``data`` inside the preview page."""
    email_html = render_email_template(
        template.components,
        template.layout,
        template.theme,
        data,
    )
    variables = "".join(
        f"<li><code>{{{html.escape(key)}}}</code>: {html.escape(str(value))}</li>"
        for key, value in data.items()
    )
    return PREVIEW_HTML.format(
        title=PREVIEW_TITLES.get(preview_type, "Confirmation"),
        subject=html.escape(interpolate_variables(template.subject, data)),
        layout=html.escape(template.layout),
        variables=variables,
        email_html=email_html,
    )


def _parse_body(event: Mapping[str, Any]) -> dict[str, Any]:
    """Parse JSON request body."""
    raw = event.get("body") or ""
    if event.get("isBase64Encoded"):
        raw = base64.b64decode(raw).decode("utf-8")
    if not raw:
        raise ValidationError("Request body is required")
    try:
        body = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValidationError("Request body must be valid JSON") from exc
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def parse_preview_request(event: Mapping[str, Any]) -> PreviewRequestSchema:
    """Validate the request and return the parsed preview payload."""
    validate_content_type(event)
    body = _parse_body(event)
    if not body.get("template"):
        raise ValidationError("Template data is required", field="template")
    try:
        return PreviewRequestSchema.model_validate(body)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(
            f"Invalid template: {first.get('msg', 'invalid value')}",
            field=location or None,
        ) from exc


def lambda_handler(event: Mapping[str, Any], context: Any) -> dict[str, Any]:
    """Handle API Gateway request for a template preview."""
    request_id = event.get("requestContext", {}).get("requestId", "")
    set_request_context(req_id=request_id)

    try:
        request = parse_preview_request(event)
        template = request.template.to_template()
        page = render_preview(template, request.type, get_sample_data())
        logger.info(
            f"Preview rendered: {request.type} ({len(template.components)} blocks)"
        )
        return html_response(200, page, event=event)
    except AppError as exc:
        logger.warning(f"Preview rejected: {exc.message}")
        return json_response(exc.status_code, exc.to_dict(), event=event)
    except Exception:
        logger.exception("Unexpected error generating preview")
        return error_response(500, "Failed to generate preview", event=event)
