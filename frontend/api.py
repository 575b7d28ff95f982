# frontend/api.py

from flask import Blueprint, request, jsonify

from annotator.board import MinesweeperBoard
from annotator.errors import ParseError
from annotator.symbols import available_symbol_sets, load_symbols

api_blueprint = Blueprint("api", __name__)


@api_blueprint.route("/annotate", methods=["POST"])
def annotate():
    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid input: body must be a JSON object"}), 400

    text = data.get("board")
    symbol_set = data.get("symbols", "default")

    if not isinstance(text, str):
        return jsonify({"error": "Invalid input: 'board' must be a string"}), 400
    if not isinstance(symbol_set, str):
        return jsonify({"error": "Invalid input: 'symbols' must be a string"}), 400

    try:
        symbols = load_symbols(symbol_set)
    except KeyError:
        return jsonify({"error": f"Unknown symbol set: {symbol_set}"}), 400

    # A fresh board per request; nothing is shared between calls.
    try:
        board = MinesweeperBoard.from_text(text, symbols)
    except ParseError as e:
        return jsonify({"error": f"Failed to parse board: {e}"}), 422

    return jsonify({
        "rows": board.rows,
        "cols": board.cols,
        "mines": board.mine_count(),
        "rendered": board.render(),
        "grid": board.to_array().tolist(),
    })


@api_blueprint.route("/symbols", methods=["GET"])
def symbols():
    return jsonify({"symbols": available_symbol_sets()})
