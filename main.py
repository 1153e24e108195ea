import sys

from saathi.analysis.classifier import get_classifier
from saathi.analysis.trend import predict_all
from saathi.assistant.widget import blocking_schedule, build_widget
from saathi.config import CONFIG
from saathi.data.fixtures import MOCK_ANALYTICS, MOCK_COMPLAINTS
from saathi.reporting.exporter import Exporter
from saathi.reporting.report import generate_smart_report
from saathi.utils import setup_logging

USAGE = "Usage: python main.py [report|predict|classify <text>|chat]"

def run_report():
    report = generate_smart_report(MOCK_COMPLAINTS)
    print(report)
    paths = Exporter.save(report, MOCK_ANALYTICS, MOCK_COMPLAINTS, predict_all(), out_dir=CONFIG.output_dir)
    print(f"\nFiles saved: {', '.join(paths.values())}")

def run_predict():
    for category, p in predict_all().items():
        print(f"[{p.alert.upper()}] {category}: {p.message}")

def run_classify(text):
    result = get_classifier().classify(text)
    for key, value in result.items():
        print(f"{key}: {value}")

def run_chat():
    widget = build_widget(CONFIG, schedule=blocking_schedule)
    widget.open()
    print(widget.state.messages[-1].content)
    print("(type 'exit' to quit)")
    while True:
        try:
            text = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if text.lower() in ("exit", "quit"):
            break
        reply = widget.send_message(text)
        if reply is not None:
            print(reply.content)

def main():
    setup_logging()

    args = sys.argv[1:]
    command = args[0] if args else "report"

    if command == "report":
        run_report()
    elif command == "predict":
        run_predict()
    elif command == "classify" and len(args) > 1:
        run_classify(" ".join(args[1:]))
    elif command == "chat":
        run_chat()
    else:
        print(USAGE)
        sys.exit(2)

if __name__ == "__main__":
    main()
