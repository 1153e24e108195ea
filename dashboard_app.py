"""
Flask JSON API over the dashboard fixtures and heuristics.
Run: python dashboard_app.py
Open: http://127.0.0.1:8050/api/analytics
"""

from flask import Flask, jsonify, request

from saathi.analysis.classifier import get_classifier
from saathi.analysis.trend import predict_all
from saathi.dashboard.charts import priority_hotspot, stat_cards
from saathi.data.fixtures import MOCK_ANALYTICS, MOCK_COMPLAINTS, MOCK_DISTRICTS
from saathi.reporting.report import generate_smart_report
from saathi.utils import get_logger, setup_logging

logger = get_logger(__name__)

app = Flask(__name__)

@app.route("/healthz")
def healthz():
    return jsonify({"status": "ok"})

@app.route("/api/analytics")
def api_analytics():
    return jsonify({
        "cards": stat_cards(MOCK_ANALYTICS),
        "analytics": MOCK_ANALYTICS.model_dump(),
    })

@app.route("/api/predictions")
def api_predictions():
    predictions = {
        category: {"alert": p.alert, "message": p.message, "percent_change": p.percent_change}
        for category, p in predict_all().items()
    }
    return jsonify({"predictions": predictions, "hotspot": priority_hotspot()})

@app.route("/api/districts")
def api_districts():
    return jsonify([d.model_dump() for d in MOCK_DISTRICTS])

@app.route("/api/complaints")
def api_complaints():
    return jsonify([c.model_dump(mode="json") for c in MOCK_COMPLAINTS])

@app.route("/api/report")
def api_report():
    return jsonify({"report": generate_smart_report(MOCK_COMPLAINTS)})

@app.route("/api/classify", methods=["POST"])
def api_classify():
    data = request.get_json(silent=True) or {}
    text = data.get("text")
    if not isinstance(text, str) or not text.strip():
        return jsonify({"error": "Field 'text' is required."}), 400
    result = get_classifier().classify(text)
    logger.info(f"Classified text ({len(text)} chars): {result}")
    return jsonify(result)

if __name__ == "__main__":
    setup_logging()
    # 5000 is where the chat backend lives by default
    app.run(port=8050, debug=False)
