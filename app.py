# app.py
import argparse
import json
import sys

from flask import Flask, request, jsonify

from text_analyzer import TextAnalysisEngine, export_snapshot, save_snapshot_to_file
from text_analyzer.config import default_config, load_config
from text_analyzer.errors import TextAnalyzerError, InvalidInputError, SourceError, HistoryError
from text_analyzer.history import HistoryStore, calculate_statistics
from text_analyzer.logger import get_logger, set_debug
from text_analyzer.models import ANALYSIS_KINDS
from text_analyzer.sources import PageFetcher, read_text_file, extract_visible_text

logger = get_logger("text_analyzer.app")

# --- Flask App Setup ---
app = Flask(__name__)
# Configuration used by the API; replaced by run_cli() when a --config file is given
flask_app_config = default_config()
history_store = None


def configure_app(config=None, store=None):
    """Set the configuration and history store used by the API routes."""
    global flask_app_config, history_store
    flask_app_config = config if config else default_config()
    history_store = store


def get_history_store():
    global history_store
    if history_store is None:
        hist_cfg = flask_app_config.get("History", {})
        history_store = HistoryStore(hist_cfg.get("path", "history.json"), hist_cfg.get("max_items", 10))
    return history_store


def parse_options(raw):
    """Accept a {kind: bool} mapping, a list of kinds or a comma-separated string."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, dict):
        return raw
    if isinstance(raw, list):
        return raw
    return [kind.strip() for kind in str(raw).split(',') if kind.strip()]


def text_stats(text: str) -> dict:
    stripped = text.strip()
    return {"wordCount": len(stripped.split()) if stripped else 0, "charCount": len(text)}


def error_response(e: TextAnalyzerError):
    return jsonify(e.to_response()), e.http_status


def _request_data():
    if request.method == 'GET':
        return {"text": request.args.get('text'), "options": request.args.get('kinds')}
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


@app.route('/analyze', methods=['POST', 'GET'])
def analyze_endpoint():
    data = _request_data()
    if data is None:
        return jsonify({"error": "Invalid JSON payload"}), 400
    text = data.get('text')
    if not isinstance(text, str):
        return jsonify({"error": "text parameter is required"}), 400

    engine = TextAnalysisEngine(config=flask_app_config)
    try:
        results = engine.analyze(text, parse_options(data.get('options')))
    except InvalidInputError as e:
        return error_response(e)

    try:
        get_history_store().add(text, results)
    except HistoryError as e:
        logger.error("Failed to save to history: %s", e)

    response = {"analysis": results}
    response.update(text_stats(text))
    return jsonify(response)


@app.route('/export', methods=['POST'])
def export_endpoint():
    data = _request_data()
    if data is None:
        return jsonify({"error": "Invalid JSON payload"}), 400
    text = data.get('text')
    if not isinstance(text, str):
        return jsonify({"error": "text parameter is required"}), 400

    engine = TextAnalysisEngine(config=flask_app_config)
    try:
        results = engine.analyze(text, parse_options(data.get('options')))
    except InvalidInputError as e:
        return error_response(e)
    return jsonify(export_snapshot(results, text))


@app.route('/history', methods=['GET'])
def history_endpoint():
    return jsonify([entry.to_dict() for entry in get_history_store().entries()])


@app.route('/history', methods=['DELETE'])
def clear_history_endpoint():
    try:
        get_history_store().clear()
    except HistoryError as e:
        return error_response(e)
    return jsonify({"status": "cleared"})


@app.route('/history/stats', methods=['GET'])
def history_stats_endpoint():
    return jsonify(calculate_statistics(get_history_store().entries()))


@app.route('/history/<int:entry_id>', methods=['GET'])
def history_item_endpoint(entry_id):
    entry = get_history_store().get(entry_id)
    if entry is None:
        return jsonify({"error": "History item not found"}), 404
    return jsonify(entry.to_dict())


@app.route('/history/<int:entry_id>', methods=['DELETE'])
def delete_history_item_endpoint(entry_id):
    try:
        deleted = get_history_store().delete(entry_id)
    except HistoryError as e:
        return error_response(e)
    if not deleted:
        return jsonify({"error": "History item not found"}), 404
    return jsonify({"status": "deleted", "id": entry_id})


def print_summary(results: dict):
    print("\n--- Analysis Summary ---")
    sentiment = results.get("sentiment")
    if sentiment:
        print(f"Sentiment: {sentiment['label']} {sentiment['emoji']} (score {sentiment['score']}, confidence {sentiment['confidence']}%)")
    keywords = results.get("keywords")
    if keywords is not None:
        words = ", ".join(f"{kw['word']} ({kw['frequency']})" for kw in keywords)
        print(f"Keywords: {words or 'none found'}")
    if "summary" in results:
        print(f"Summary: {results['summary']}")
    readability = results.get("readability")
    if readability:
        print(f"Readability: {readability['fleschScore']} - {readability['level']} ({readability['grade']})")
        print(f"  {readability['wordCount']} words, {readability['sentenceCount']} sentences, "
              f"{readability['avgWordsPerSentence']} words/sentence, {readability['avgSyllablesPerWord']} syllables/word")


def read_input_text(args, config) -> str:
    if args.url:
        return PageFetcher(config).fetch_text(args.url)
    text = read_text_file(args.file) if args.file else args.text
    if args.html:
        text = extract_visible_text(text)
    return text


def build_parser():
    parser = argparse.ArgumentParser(description="Text Analyzer: sentiment, keywords, summary and readability")
    parser.add_argument("text", nargs='?', default=None, help="Text to analyze (omit to run in API/server mode).")
    parser.add_argument("--file", type=str, default=None, help="Read the text to analyze from a file.")
    parser.add_argument("--url", type=str, default=None, help="Fetch a web page and analyze its visible text.")
    parser.add_argument("--html", action="store_true", help="Treat the text or file as HTML and analyze its visible text.")
    parser.add_argument("--only", nargs="+", choices=ANALYSIS_KINDS, default=None, help="Run only these analyses.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--export", nargs='?', const="reports", default=None, metavar="DIR", help="Save a JSON snapshot (default directory: reports).")
    parser.add_argument("--history-file", type=str, default=None, help="History file (overrides config).")
    parser.add_argument("--no-history", action="store_true", help="Do not record this analysis in the history.")
    parser.add_argument("--stats", action="store_true", help="Print statistics over the saved history and exit.")
    parser.add_argument("--json", action="store_true", help="Print the raw results as JSON.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser


def run_cli(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    current_config = load_config(args.config)
    if args.history_file:
        current_config.setdefault("History", {})["path"] = args.history_file
    if args.debug:
        current_config.setdefault("Global", {})["debug"] = True
    set_debug(bool(current_config.get("Global", {}).get("debug")))
    configure_app(current_config)

    if args.stats:
        print(json.dumps(calculate_statistics(get_history_store().entries()), indent=2, ensure_ascii=False))
        return 0

    # Without any text source, run in API/server mode
    if args.text is None and not args.file and not args.url:
        default_host = "127.0.0.1"
        default_port = 5000
        print(f"Starting Flask server on http://{default_host}:{default_port}/ (API mode)")
        app.run(host=default_host, port=default_port, debug=False)
        return 0

    try:
        text = read_input_text(args, current_config)
        engine = TextAnalysisEngine(config=current_config)
        results = engine.analyze(text, args.only)
    except (InvalidInputError, SourceError) as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(json.dumps(results, indent=2, ensure_ascii=False))
    else:
        print_summary(results)

    if not args.no_history:
        try:
            get_history_store().add(text, results)
        except HistoryError as e:
            logger.error("Failed to save to history: %s", e)

    if args.export:
        path = save_snapshot_to_file(export_snapshot(results, text), directory=args.export)
        if path:
            print(f"Snapshot saved to {path}")
        else:
            return 1
    return 0


def main():
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
