"""
HTML form for the compound interest solver.

The form posts every field back, so each request carries the whole form
state; nothing is kept on the server between requests.
"""

from __future__ import annotations

from typing import Any, Optional

from flask import Blueprint, current_app, render_template_string, request

from backend.core.errors import InvalidInput
from backend.domain.form import Calculation, FormState, calculate, select_target
from backend.models import Target

web_bp = Blueprint("web", __name__)

# ═══════════════════════════════════════════════════════════════════
# HTML Template
# ═══════════════════════════════════════════════════════════════════

HTML_TEMPLATE = r"""
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Compound Interest Calculator</title>
<style>
  *{margin:0;padding:0;box-sizing:border-box}
  body{font-family:system-ui,-apple-system,sans-serif;background:#f4f6fb;color:#1e293b;line-height:1.5}
  .container{max-width:520px;margin:3rem auto;padding:2rem;background:#fff;border-radius:12px;
    box-shadow:0 8px 24px rgba(15,23,42,.08)}
  h1{font-size:1.5rem;margin-bottom:.4rem}
  .formula{color:#64748b;font-size:.9rem;margin-bottom:1.5rem}
  label{display:block;font-weight:600;font-size:.85rem;margin:.9rem 0 .3rem}
  input,select{width:100%;padding:.55rem .7rem;border:1px solid #cbd5e1;border-radius:8px;font-size:.95rem}
  input:disabled{background:#e9e9e9;color:#94a3b8}
  button{margin-top:1.4rem;width:100%;padding:.7rem;border:0;border-radius:8px;background:#4f46e5;
    color:#fff;font-weight:600;font-size:1rem;cursor:pointer}
  #result{margin-top:1.4rem;min-height:1.5rem}
  #result p{padding:.7rem .9rem;border-radius:8px;background:#ecfdf5}
  #result p.error{background:#fef2f2;color:#b91c1c}
</style>
</head>
<body>
<div class="container">
  <h1>Compound Interest Calculator</h1>
  <p class="formula">A = P (1 + r/n)<sup>nT</sup></p>

  <form id="interestForm" method="post" action="{{ url_for('web.index') }}">
    <input type="hidden" name="intent" value="calculate">

    <label for="solveFor">Solve for</label>
    <select id="solveFor" name="solve_for"
            onchange="this.form.intent.value='select'; this.form.submit()">
      {% for field in fields %}
      <option value="{{ field.value }}" {% if field == state.active_target %}selected{% endif %}>
        {{ labels[field] }}
      </option>
      {% endfor %}
    </select>

    {% for field in fields %}
    <label for="{{ field.value }}">{{ labels[field] }}</label>
    <input type="text" inputmode="decimal" id="{{ field.value }}" name="{{ field.value }}"
           value="{{ state.values.get(field) if state.values.get(field) is not none else '' }}"
           {% if not state.is_enabled(field) %}disabled{% endif %}>
    {% endfor %}

    <button type="submit" id="calculateButton">Calculate</button>
  </form>

  <div id="result">
    {% if error %}
    <p class="error">{{ error }}</p>
    {% elif calculation %}
    <p{% if calculation.is_error %} class="error"{% endif %}>{{ calculation.display }}</p>
    {% endif %}
  </div>
</div>
</body>
</html>
"""

FIELD_NAMES = {
    Target.PRINCIPAL: ("Principal", ""),
    Target.RATE: ("Annual Rate", ", %"),
    Target.TIME: ("Time", ", years"),
    Target.FREQUENCY: ("Compounding Frequency", ", per year"),
    Target.AMOUNT: ("Final Amount", ""),
}

FIELD_LABELS = {
    field: f"{name} ({field.symbol}{unit})" for field, (name, unit) in FIELD_NAMES.items()
}


def _render(
    state: FormState,
    calculation: Optional[Calculation] = None,
    error: Optional[str] = None,
    status: int = 200,
) -> Any:
    html = render_template_string(
        HTML_TEMPLATE,
        state=state,
        fields=list(Target),
        labels=FIELD_LABELS,
        calculation=calculation,
        error=error,
    )
    return html, status


@web_bp.route("/", methods=["GET", "POST"])
def index() -> Any:
    """Render the form, switch the unknown field, or show a calculation."""
    default_target = current_app.config["SETTINGS"].default_target
    source = request.form if request.method == "POST" else request.args

    try:
        state = FormState.from_form(source, default_target=default_target)
    except InvalidInput as exc:
        return _render(FormState(active_target=default_target), error=str(exc), status=400)

    if request.method == "GET":
        return _render(state)

    if request.form.get("intent") == "select":
        return _render(select_target(state, state.active_target))

    return _render(state, calculation=calculate(state))
