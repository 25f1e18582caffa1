"""Flask routes for the gesture server.

JSON endpoints over the shared recognizer:

    POST   /api/recognize  Classify a stroke.
    GET    /api/gestures   List template names and counts.
    POST   /api/gestures   Register a user gesture.
    DELETE /api/gestures   Drop all user gestures.
"""

import logging

from flask import jsonify, request

from gesture_flask import app, get_recognizer, validate_points_param

logger = logging.getLogger(__name__)


@app.route('/api/recognize', methods=['POST'])
def api_recognize():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify(error="Expected a JSON object body"), 400
    use_protractor = data.get('protractor', False)
    if not isinstance(use_protractor, bool):
        return jsonify(error="'protractor' must be true or false"), 400
    pts, err = validate_points_param(data.get('points'))
    if err:
        return err
    result = get_recognizer().recognize(pts, use_protractor=use_protractor)
    return jsonify(result.to_dict())


@app.route('/api/gestures', methods=['GET'])
def api_list_gestures():
    recognizer = get_recognizer()
    gestures = recognizer.list_gestures()
    return jsonify(
        gestures=gestures,
        total=sum(gestures.values()),
        builtin=recognizer.repository.builtin_count,
    )


@app.route('/api/gestures', methods=['POST'])
def api_add_gesture():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify(error="Expected a JSON object body"), 400
    name = data.get('name')
    if not isinstance(name, str) or not name.strip():
        return jsonify(error="Missing gesture 'name'"), 400
    pts, err = validate_points_param(data.get('points'))
    if err:
        return err
    recognizer = get_recognizer()
    count = recognizer.add_gesture(name, pts)
    return jsonify(name=name, count=count, total=len(recognizer.repository)), 201


@app.route('/api/gestures', methods=['DELETE'])
def api_reset_gestures():
    total = get_recognizer().reset_user_gestures()
    logger.info("User gestures reset via API")
    return jsonify(total=total)
