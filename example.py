"""
Curve Engine - 사용 예시
곡선 평가, 목표 점 생성, 판정, 세션 진행 시나리오
"""

from curve_engine import (
    Mode, Coefficients, Point,
    PointGenerator, SolutionChecker, GameSession,
    GraphVisualizer, CanvasTransform,
    evaluate, format_equation, sample_path
)


def example_1_evaluate():
    """
    예시 1: 모드별 곡선 값 계산
    - 3차 곡선에는 2차항이 없다 (y = ax³ + bx + c)
    """
    print("\n" + "="*60)
    print("예시 1: 곡선 값 계산")
    print("="*60)

    coeffs = Coefficients(a=1, b=0, c=0)
    for mode in Mode:
        print(f"  {format_equation(coeffs, mode):<28} x=2 -> y={evaluate(2, coeffs, mode)}")


def example_2_generate_and_check():
    """
    예시 2: 목표 점 생성 후 판정
    - 시드를 고정하면 같은 점이 나온다
    """
    print("\n" + "="*60)
    print("예시 2: 목표 점 생성 + 판정")
    print("="*60)

    generator = PointGenerator(seed=42)
    targets = generator.generate_for_mode(Mode.LINEAR)
    print(f"  목표 점: {[(p.x, p.y) for p in targets]}")

    # 두 점을 지나는 직선 계수 계산
    p1, p2 = targets
    a = (p2.y - p1.y) / (p2.x - p1.x)
    b = p1.y - a * p1.x
    coeffs = Coefficients(a=a, b=b)

    report = SolutionChecker().check_detailed(coeffs, Mode.LINEAR, targets)
    print(f"  {format_equation(coeffs, Mode.LINEAR)}")
    print(report)


def example_3_tolerance():
    """
    예시 3: 허용 오차 경계
    - |5 - 5.3| = 0.3 < 0.4 통과, |5 - 5.5| = 0.5 실패
    """
    print("\n" + "="*60)
    print("예시 3: 허용 오차")
    print("="*60)

    checker = SolutionChecker(tolerance=0.4)
    coeffs = Coefficients(a=0, b=0, c=5)
    for y in (5.3, 5.5):
        ok = checker.check(coeffs, Mode.QUADRATIC, [Point(3, y)])
        print(f"  목표 (3, {y}) -> {'통과' if ok else '실패'}")


def example_4_session():
    """
    예시 4: 게임 세션
    - 모드 변경 시 계수 초기화 + 새 목표 점
    - 성공 후 확인하면 다음 레벨
    """
    print("\n" + "="*60)
    print("예시 4: 게임 세션")
    print("="*60)

    session = GameSession(seed=7)
    print(f"  시작: {session.state}")

    session.change_mode(Mode.LINEAR)
    print(f"  모드 변경: {session.state}")

    p1, p2 = session.targets
    a = (p2.y - p1.y) / (p2.x - p1.x)
    session.set_coefficient('a', a)
    session.set_coefficient('b', p1.y - a * p1.x)

    succeeded = session.check()
    print(f"  판정: {'성공' if succeeded else '실패'}")
    session.acknowledge(succeeded)
    print(f"  다음 레벨: {session.state}")
    print(f"  곡선 샘플 수: {len(session.curve_path)}")


def example_5_render():
    """예시 5: 그래프 이미지 저장"""
    print("\n" + "="*60)
    print("예시 5: 그래프 이미지")
    print("="*60)

    transform = CanvasTransform(width=600, height=600, scale=40)
    coeffs = Coefficients(a=0.5, b=-1, c=-2)
    targets = [Point(-2, 2), Point(0, -2), Point(2, -2)]

    path = sample_path(coeffs, Mode.QUADRATIC, transform=transform)
    print(f"  SVG 경로 앞부분: {path.to_svg()[:60]}...")

    visualizer = GraphVisualizer(transform=transform)
    visualizer.save_to_file(
        path,
        [transform.to_canvas(p.x, p.y) for p in targets],
        "example_curve.png"
    )
    print("  ✓ example_curve.png 저장")


if __name__ == "__main__":
    example_1_evaluate()
    example_2_generate_and_check()
    example_3_tolerance()
    example_4_session()
    example_5_render()
