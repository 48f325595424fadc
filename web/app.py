"""
Flask web app exposing LDraw part header metadata as JSON.
"""

from flask import Flask, jsonify
from pathlib import Path
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from datparser import load_part, SourceNotFoundError, ParseError

app = Flask(__name__)


@app.errorhandler(SourceNotFoundError)
def handle_not_found(error):
    return jsonify({"error": str(error)}), 404


@app.errorhandler(ParseError)
def handle_parse_error(error):
    return jsonify({"error": str(error)}), 422


@app.route('/api/parts/<path:part_id>')
def api_part(part_id):
    """Header metadata of one library part."""
    return jsonify(load_part(part_id, library_only=True).to_dict())


@app.route('/api/subparts/<path:part_id>')
def api_part_subparts(part_id):
    """Referenced sub-files of one library part with occurrence counts."""
    record = load_part(part_id, library_only=True)
    return jsonify({"id": record.id, "subparts": dict(record.subparts)})


if __name__ == '__main__':
    app.run(debug=True, port=5000)
