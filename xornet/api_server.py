"""
api_server.py
~~~~~~~~~~~~~

Flask-based REST API for creating, training and querying XOR networks.

This module provides endpoints for:
- Creating and deleting networks
- Training networks (synchronously, inside the request)
- Querying predictions

Networks live in memory only and are lost when the process exits.
"""

import uuid
import logging
from typing import Any, Dict, Optional

from flask import Flask, request, jsonify
from flask_cors import CORS

from xornet.config import DEFAULT_HIDDEN_SIZE, Settings, configure_logging
from xornet.demo import XOR_INPUTS, XOR_TARGETS
from xornet.exceptions import DimensionMismatch
from xornet.network import Network

logger = logging.getLogger(__name__)

settings = Settings.from_env()

# ============================================================================
# FLASK APP SETUP
# ============================================================================

app = Flask(__name__)
CORS(app, resources={r"/api/*": {"origins": "*"}})

# ============================================================================
# GLOBAL STATE
# ============================================================================

# Networks currently loaded in memory: {network_id: network_info}
active_networks: Dict[str, Dict[str, Any]] = {}


def request_body() -> Optional[Dict[str, Any]]:
    """
    Return the JSON request body as a dict.

    A missing or unparseable body counts as empty; any other JSON value
    (array, string, number) yields None.
    """
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        return None
    return data


def network_summary(network_id: str) -> Dict[str, Any]:
    """Describe a stored network without its parameters."""
    info = active_networks[network_id]
    net = info['network']
    return {
        'network_id': network_id,
        'input_size': net.input_size,
        'hidden_size': net.hidden_size,
        'learning_rate': net.learning_rate,
        'trained': info['trained'],
        'loss': info['loss']
    }


# ============================================================================
# ERROR HANDLERS
# ============================================================================

@app.errorhandler(DimensionMismatch)
def handle_dimension_mismatch(error: DimensionMismatch):
    logger.warning(f"Dimension mismatch: {error}")
    return jsonify({
        'error': str(error),
        'expected': error.expected,
        'actual': error.actual
    }), 400


# ============================================================================
# API ENDPOINTS
# ============================================================================

@app.route('/api/status', methods=['GET'])
def get_status():
    """Return server status and the number of networks in memory."""
    return jsonify({
        'status': 'online',
        'active_networks': len(active_networks)
    }), 200


@app.route('/api/networks', methods=['POST'])
def create_network():
    """
    Create a new neural network.

    Request body (all optional):
        {'input_size': 2, 'hidden_size': 2, 'learning_rate': 0.5}

    Returns:
        JSON with network_id, sizes, learning rate and status
    """
    data = request_body()
    if data is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    input_size = data.get('input_size', 2)
    hidden_size = data.get('hidden_size', DEFAULT_HIDDEN_SIZE)
    learning_rate = data.get('learning_rate', settings.learning_rate)

    try:
        net = Network(input_size, hidden_size, learning_rate)
    except ValueError as e:
        logger.warning(f"Invalid network requested: {e}")
        return jsonify({'error': str(e)}), 400

    network_id = str(uuid.uuid4())
    active_networks[network_id] = {
        'network': net,
        'trained': False,
        'loss': None
    }

    logger.info(f"Created network {network_id}: {net!r}")

    return jsonify({
        'network_id': network_id,
        'input_size': input_size,
        'hidden_size': hidden_size,
        'learning_rate': net.learning_rate,
        'status': 'created'
    }), 201


@app.route('/api/networks', methods=['GET'])
def list_networks():
    """List all networks held in memory."""
    networks = [network_summary(nid) for nid in active_networks]
    return jsonify({'networks': networks}), 200


@app.route('/api/networks/<network_id>', methods=['GET'])
def get_network(network_id: str):
    """Return a network's summary and a copy of its parameters."""
    if network_id not in active_networks:
        return jsonify({'error': 'Network not found'}), 404

    summary = network_summary(network_id)
    summary['parameters'] = active_networks[network_id]['network'].get_parameters()
    return jsonify(summary), 200


@app.route('/api/networks/<network_id>/train', methods=['POST'])
def train_network(network_id: str):
    """
    Train a network and return once training has finished.

    Request body (all optional):
        {
            'inputs': [[0, 0], [0, 1], [1, 0], [1, 1]],
            'targets': [0, 1, 1, 0],
            'epochs': 10000
        }

    Inputs and targets default to the XOR truth table; they must be
    given together.

    Returns:
        JSON with network_id, epochs, final loss and trained flag
    """
    if network_id not in active_networks:
        logger.warning(f"Training requested for non-existent network: {network_id}")
        return jsonify({'error': 'Network not found'}), 404

    data = request_body()
    if data is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    epochs = data.get('epochs', settings.epochs)
    inputs = data.get('inputs')
    targets = data.get('targets')

    if (inputs is None) != (targets is None):
        return jsonify({'error': 'inputs and targets must be given together'}), 400
    if inputs is None:
        inputs, targets = XOR_INPUTS, XOR_TARGETS
    if not isinstance(inputs, list) or not isinstance(targets, list):
        return jsonify({'error': 'inputs and targets must be lists'}), 400

    net = active_networks[network_id]['network']
    final = {'loss': None}

    def on_epoch_complete(progress: Dict[str, Any]) -> None:
        final['loss'] = progress['loss']

    try:
        net.train(inputs, targets, epochs, callback=on_epoch_complete)
    except DimensionMismatch:
        raise
    except (TypeError, ValueError) as e:
        return jsonify({'error': str(e)}), 400

    active_networks[network_id]['trained'] = True
    active_networks[network_id]['loss'] = final['loss']

    logger.info(f"Training completed for network {network_id}: loss {final['loss']}")

    return jsonify({
        'network_id': network_id,
        'epochs': epochs,
        'loss': final['loss'],
        'trained': True
    }), 200


@app.route('/api/networks/<network_id>/predict', methods=['POST'])
def predict(network_id: str):
    """
    Run inference without modifying the network.

    Request body:
        {'input': [0, 1]} or {'inputs': [[0, 0], [0, 1]]}
    """
    if network_id not in active_networks:
        return jsonify({'error': 'Network not found'}), 404

    data = request_body()
    if data is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    net = active_networks[network_id]['network']

    try:
        if 'inputs' in data:
            return jsonify({'predictions': net.predict_many(data['inputs'])}), 200
        if 'input' in data:
            return jsonify({'prediction': net.predict(data['input'])}), 200
    except DimensionMismatch:
        raise
    except (TypeError, ValueError) as e:
        return jsonify({'error': str(e)}), 400

    return jsonify({'error': "Request body must contain 'input' or 'inputs'"}), 400


@app.route('/api/networks/<network_id>', methods=['DELETE'])
def delete_network_endpoint(network_id: str):
    """Delete a network from memory."""
    if network_id not in active_networks:
        logger.warning(f"Delete attempted for non-existent network: {network_id}")
        return jsonify({'error': 'Network not found'}), 404

    del active_networks[network_id]
    logger.info(f"Deleted network {network_id}")

    return jsonify({'network_id': network_id, 'deleted': True}), 200


def main() -> None:
    """Run the development server."""
    configure_logging(settings)
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    app.run(host=settings.host, port=settings.port, debug=not settings.is_production)


if __name__ == '__main__':
    main()
