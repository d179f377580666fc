"""
Curve Engine - Flask REST API
웹 화면용 API 엔드포인트 (세션 상태를 서버에 두지 않음)

실행: flask --app api run --debug
또는: python api.py
"""

from flask import Flask, jsonify, request
from flask_cors import CORS

from curve_engine import (
    Mode, Coefficients, Point, GameConfig,
    PointGenerator, SolutionChecker, GraphVisualizer,
    sample_path, format_equation,
    point_count_for, active_coefficients
)

app = Flask(__name__)
CORS(app)  # CORS 활성화

# 전역 설정
config = GameConfig()


def _parse_mode(data: dict) -> Mode:
    return Mode.from_value(data.get('mode', config.default_mode.value))


def _parse_coefficients(data: dict, mode: Mode) -> Coefficients:
    """모드에서 쓰는 계수만 범위 [-5, 5] 확인 (1차의 c는 무시)"""
    raw = data.get('coefficients') or {}
    coefficients = Coefficients.from_dict(raw)
    values = coefficients.to_dict()
    for name in active_coefficients(mode):
        config.validate_coefficient(name, values[name])
    return coefficients


def _parse_targets(data: dict):
    return [Point.from_dict(p) for p in data.get('targets', [])]


@app.errorhandler(ValueError)
@app.errorhandler(KeyError)
@app.errorhandler(TypeError)
def handle_bad_request(e):
    return jsonify({
        'success': False,
        'error': str(e)
    }), 400


@app.route('/')
def index():
    """API 정보"""
    return jsonify({
        'name': 'Curve Engine API',
        'version': '1.0.0',
        'description': '다항식 곡선 맞추기 퍼즐 API',
        'endpoints': {
            '/modes': 'GET - 곡선 종류 목록',
            '/generate': 'POST - 목표 점 생성',
            '/check': 'POST - 정답 판정',
            '/path': 'POST - 곡선 경로 (SVG)',
            '/render': 'POST - 그래프 이미지 (PNG)'
        }
    })


@app.route('/modes', methods=['GET'])
def get_modes():
    """곡선 종류 목록"""
    modes = [
        {
            'id': mode.value,
            'point_count': point_count_for(mode),
            'coefficients': list(active_coefficients(mode))
        }
        for mode in Mode
    ]
    return jsonify({
        'modes': modes,
        'default': config.default_mode.value,
        'coefficient_range': {
            'min': config.coefficient_min,
            'max': config.coefficient_max,
            'step': config.coefficient_step
        }
    })


@app.route('/generate', methods=['POST'])
def generate_targets():
    """
    새 목표 점 생성

    Request Body:
    {
        "mode": "quadratic",  // 곡선 종류
        "seed": null          // 랜덤 시드 (선택)
    }
    """
    data = request.get_json(silent=True) or {}
    mode = _parse_mode(data)

    generator = PointGenerator(
        seed=data.get('seed'),
        coord_min=config.coord_min,
        coord_max=config.coord_max
    )
    targets = generator.generate_for_mode(mode)

    return jsonify({
        'success': True,
        'mode': mode.value,
        'point_count': len(targets),
        'targets': [p.to_dict() for p in targets],
        'coefficients': Coefficients().to_dict()
    })


@app.route('/check', methods=['POST'])
def check_solution():
    """
    정답 판정

    Request Body:
    {
        "mode": "linear",
        "coefficients": {"a": 2, "b": 0, "c": 0},
        "targets": [{"x": 1, "y": 2}, ...],
        "tolerance": 0.4      // 선택
    }
    """
    data = request.get_json(silent=True) or {}
    mode = _parse_mode(data)
    coefficients = _parse_coefficients(data, mode)
    targets = _parse_targets(data)
    tolerance = float(data.get('tolerance', config.tolerance))

    report = SolutionChecker(tolerance).check_detailed(coefficients, mode, targets)

    return jsonify({
        'success': True,
        'report': report.to_dict()
    })


@app.route('/path', methods=['POST'])
def curve_path():
    """곡선 경로 (캔버스 좌표)"""
    data = request.get_json(silent=True) or {}
    mode = _parse_mode(data)
    coefficients = _parse_coefficients(data, mode)

    path = sample_path(
        coefficients, mode,
        domain=config.domain,
        step=config.step,
        transform=config.transform()
    )

    return jsonify({
        'success': True,
        'equation': format_equation(coefficients, mode),
        'svg': path.to_svg(),
        'points': path.points
    })


@app.route('/render', methods=['POST'])
def render_graph():
    """그래프 PNG (base64)"""
    data = request.get_json(silent=True) or {}
    mode = _parse_mode(data)
    coefficients = _parse_coefficients(data, mode)
    targets = _parse_targets(data)
    theme = data.get('theme', 'light')

    transform = config.transform()
    path = sample_path(
        coefficients, mode,
        domain=config.domain,
        step=config.step,
        transform=transform
    )
    visualizer = GraphVisualizer(transform=transform, theme=theme)
    img = visualizer.draw(path, [transform.to_canvas(p.x, p.y) for p in targets])

    return jsonify({
        'success': True,
        'image': f"data:image/png;base64,{img}"
    })


@app.errorhandler(500)
def handle_server_error(e):
    return jsonify({
        'success': False,
        'error': str(getattr(e, 'original_exception', e))
    }), 500


if __name__ == '__main__':
    print("=" * 50)
    print("Curve Engine API Server")
    print("=" * 50)
    print("Server starting at http://localhost:5000")
    print()
    app.run(debug=True, host='0.0.0.0', port=5000)
