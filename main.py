"""
Curve Engine - 다항식 곡선 맞추기 퍼즐
메인 실행 파일

사용법:
    python main.py                          # 2차 곡선 문제 생성
    python main.py --mode cubic --seed 7    # 3차 곡선, 시드 고정
    python main.py -a 2 -b 0 --mode linear  # 계수를 넣어 바로 판정
    python main.py --play                   # 대화형 플레이
    python main.py --save                   # 그래프 이미지 저장
"""

import argparse
import base64
import logging
import os
from datetime import datetime
from typing import Callable, List, Optional

from curve_engine import (
    Mode, GameConfig, GameSession,
    GraphVisualizer, Localizer,
    MemoryPreferenceStore, JsonPreferenceStore,
    format_equation, active_coefficients
)
from curve_engine.preferences import (
    get_language, set_language, get_theme, toggle_theme
)


class ConsoleNotifier:
    """판정 결과를 콘솔에 출력하는 알림 UI"""

    def __init__(self, localizer: Localizer):
        self.localizer = localizer
        self.pending: Optional[Callable[[], None]] = None

    def notify(self, succeeded: bool, on_acknowledge: Callable[[], None]) -> None:
        mark = "✅" if succeeded else "❌"
        print(f"\n{mark} {self.localizer.result_message(succeeded)}")
        print(f"   [{self.localizer.result_button(succeeded)}]")
        self.pending = on_acknowledge

    def dismiss(self):
        if self.pending is not None:
            callback, self.pending = self.pending, None
            callback()


class CurveEngine:
    """
    Curve Engine 메인 클래스
    세션 생성, 화면 출력, 이미지 저장
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        mode: Mode = Mode.QUADRATIC,
        prefs=None
    ):
        """
        Args:
            seed: 랜덤 시드 (재현성용)
            mode: 시작 곡선 종류
            prefs: 설정 저장소 (None이면 메모리)
        """
        self.config = GameConfig(default_mode=mode)
        self.prefs = prefs if prefs is not None else MemoryPreferenceStore()
        self.localizer = Localizer(get_language(self.prefs))
        self.notifier = ConsoleNotifier(self.localizer)
        self.visualizer = GraphVisualizer(
            transform=self.config.transform(),
            theme=get_theme(self.prefs)
        )
        self.session = GameSession(
            config=self.config,
            notifier=self.notifier,
            seed=seed
        )

    def set_coefficients(self, **values):
        for name, value in values.items():
            if value is None:
                continue
            value = self.config.validate_coefficient(name, value)
            self.session.set_coefficient(name, value)

    def change_language(self, lang: str):
        set_language(self.prefs, lang)
        self.localizer = Localizer(lang)
        self.notifier.localizer = self.localizer

    def change_theme(self) -> str:
        theme = toggle_theme(self.prefs)
        self.visualizer.theme = theme
        return theme

    def display_level(self):
        """현재 레벨을 콘솔에 표시"""
        t = self.localizer
        s = self.session

        print(f"\n{'='*50}")
        print(f"📈 {t.text('title')}")
        print(f"{'='*50}")
        print(f"{t.mode_name(s.mode)}: {format_equation(s.coefficients, s.mode)}")

        print("\n【목표 점】")
        for p in s.targets:
            print(f"  ({p.x}, {p.y})")

    def display_report(self):
        if self.session.last_report is not None:
            print(self.session.last_report)

    def save_image(self, output_dir: str = "output") -> str:
        """현재 그래프를 PNG로 저장"""
        os.makedirs(output_dir, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        img_path = os.path.join(output_dir, f"curve_{self.session.mode.value}_{timestamp}.png")

        img = self.visualizer.draw(self.session.curve_path, self.session.canvas_targets)
        with open(img_path, 'wb') as f:
            f.write(base64.b64decode(img))
        print(f"✓ 그래프 이미지 저장: {img_path}")
        return img_path


HELP_TEXT = """명령:
  a <값> / b <값> / c <값>   계수 변경
  mode <linear|quadratic|cubic>
  check                      판정
  show                       현재 상태
  save                       그래프 저장
  lang <en|ru>               언어 변경
  theme                      테마 전환
  quit                       종료"""


def handle_command(engine: CurveEngine, line: str, output_dir: str = "output") -> bool:
    """
    대화형 명령 한 줄 처리

    Returns:
        계속 진행하면 True, 종료면 False
    """
    parts = line.strip().split()
    if not parts:
        return True

    cmd, args = parts[0].lower(), parts[1:]
    session = engine.session

    try:
        if cmd in ('quit', 'exit', 'q'):
            return False
        elif cmd in ('a', 'b', 'c') and args:
            if cmd not in active_coefficients(session.mode):
                print(f"⚠️ {session.mode.value} 모드에서는 {cmd}를 쓰지 않습니다.")
                return True
            engine.set_coefficients(**{cmd: float(args[0])})
            print(format_equation(session.coefficients, session.mode))
        elif cmd == 'mode' and args:
            session.change_mode(args[0])
            engine.display_level()
        elif cmd == 'check':
            succeeded = session.check()
            engine.display_report()
            engine.notifier.dismiss()
            if succeeded:
                engine.display_level()
        elif cmd == 'show':
            engine.display_level()
        elif cmd == 'save':
            engine.save_image(output_dir)
        elif cmd == 'lang' and args:
            engine.change_language(args[0])
            engine.display_level()
        elif cmd == 'theme':
            print(f"theme: {engine.change_theme()}")
        else:
            print(HELP_TEXT)
    except ValueError as e:
        print(f"⚠️ {e}")

    return True


def play(engine: CurveEngine, output_dir: str = "output"):
    """대화형 루프"""
    engine.display_level()
    print()
    print(HELP_TEXT)

    while True:
        try:
            line = input("\n> ")
        except EOFError:
            break
        if not handle_command(engine, line, output_dir):
            break


def setup_logging(level_name: str):
    """패키지 로거만 설정 (루트 로거는 건드리지 않음)"""
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("curve_engine")
    if not pkg_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
        pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def parse_args(argv: Optional[List[str]] = None):
    """명령줄 인자 파싱"""
    parser = argparse.ArgumentParser(
        description="Curve Engine - 다항식 곡선 맞추기 퍼즐"
    )

    parser.add_argument(
        '--mode', '-m',
        type=str,
        default='quadratic',
        choices=[m.value for m in Mode],
        help="곡선 종류 (기본: quadratic)"
    )

    parser.add_argument('-a', type=float, default=None, help="계수 a")
    parser.add_argument('-b', type=float, default=None, help="계수 b")
    parser.add_argument('-c', type=float, default=None, help="계수 c (1차에서는 무시)")

    parser.add_argument(
        '--seed', '-s',
        type=int,
        default=None,
        help="랜덤 시드 (재현성용)"
    )

    parser.add_argument(
        '--lang',
        type=str,
        default=None,
        choices=Localizer.languages(),
        help="표시 언어 (설정에 저장)"
    )

    parser.add_argument(
        '--theme',
        type=str,
        default=None,
        choices=['light', 'dark'],
        help="그래프 테마 (설정에 저장)"
    )

    parser.add_argument(
        '--prefs',
        type=str,
        default=None,
        help="설정 파일 경로 (JSON, 없으면 저장하지 않음)"
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        default='output',
        help="출력 디렉토리 (기본: output)"
    )

    parser.add_argument(
        '--save',
        action='store_true',
        help="그래프를 파일로 저장"
    )

    parser.add_argument(
        '--play',
        action='store_true',
        help="대화형 플레이"
    )

    parser.add_argument(
        '--log-level',
        type=str,
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help="로그 레벨 (기본: WARNING)"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """메인 함수"""
    args = parse_args(argv)
    setup_logging(args.log_level)

    prefs = JsonPreferenceStore(args.prefs) if args.prefs else MemoryPreferenceStore()
    if args.lang:
        set_language(prefs, args.lang)
    if args.theme and args.theme != get_theme(prefs):
        toggle_theme(prefs)

    # 엔진 초기화
    engine = CurveEngine(seed=args.seed, mode=Mode.from_value(args.mode), prefs=prefs)

    if args.play:
        play(engine, args.output)
        return

    engine.display_level()

    # 계수가 주어지면 바로 판정
    if any(v is not None for v in (args.a, args.b, args.c)):
        try:
            engine.set_coefficients(a=args.a, b=args.b, c=args.c)
        except ValueError as e:
            print(f"❌ 오류: {e}")
            return
        print(f"\n{format_equation(engine.session.coefficients, engine.session.mode)}")
        engine.session.check()
        engine.display_report()

    if args.save:
        engine.save_image(args.output)


if __name__ == "__main__":
    main()
