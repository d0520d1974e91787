"""
그리기 표면 모듈
논리 픽셀 공간(원점 왼쪽 위, y 는 아래로 증가)의 그리기 명령 구현
"""
from dataclasses import dataclass, field
from io import BytesIO
from typing import Dict, List, Optional

import matplotlib
matplotlib.use('Agg')  # 서버 환경에서 matplotlib 사용을 위한 백엔드 설정
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from inverter_chart_system.config import get_config

config = get_config()

GRADIENT_STEPS = 64


class DrawingSurface:
    """고정 해상도 2D 그리기 표면 인터페이스"""

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None):
        self.width = config.CHART_WIDTH if width is None else width
        self.height = config.CHART_HEIGHT if height is None else height

    def clear(self):
        raise NotImplementedError

    def line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 1):
        raise NotImplementedError

    def rounded_bar(self, x: float, y: float, width: float, height: float, radius: float,
                    top_color: str, bottom_color: str):
        """위쪽 모서리만 둥근 세로 그라데이션 막대"""
        raise NotImplementedError

    def text(self, x: float, y: float, text: str, color: str, size: float = 11, align: str = 'center'):
        raise NotImplementedError


@dataclass
class DrawCommand:
    name: str
    args: Dict = field(default_factory=dict)


class RecordingSurface(DrawingSurface):
    """그리기 명령을 기록만 하는 표면 (테스트용)"""

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None):
        super().__init__(width, height)
        self.commands: List[DrawCommand] = []
        self.clear_count = 0

    def clear(self):
        self.commands = []
        self.clear_count += 1

    def line(self, x1, y1, x2, y2, color, width=1):
        self.commands.append(DrawCommand('line', dict(x1=x1, y1=y1, x2=x2, y2=y2,
                                                      color=color, width=width)))

    def rounded_bar(self, x, y, width, height, radius, top_color, bottom_color):
        self.commands.append(DrawCommand('rounded_bar', dict(x=x, y=y, width=width, height=height,
                                                             radius=radius, top_color=top_color,
                                                             bottom_color=bottom_color)))

    def text(self, x, y, text, color, size=11, align='center'):
        self.commands.append(DrawCommand('text', dict(x=x, y=y, text=text, color=color,
                                                      size=size, align=align)))

    def of(self, name: str) -> List[DrawCommand]:
        return [command for command in self.commands if command.name == name]


def rounded_top_path(x: float, y: float, width: float, height: float, radius: float) -> Path:
    """위쪽 두 모서리가 둥글고 아래가 각진 사각형 경로"""
    r = max(0.0, min(radius, width / 2, height))
    vertices = [
        (x, y + height),
        (x, y + r),
        (x, y), (x + r, y),
        (x + width - r, y),
        (x + width, y), (x + width, y + r),
        (x + width, y + height),
        (x, y + height),
    ]
    codes = [
        Path.MOVETO,
        Path.LINETO,
        Path.CURVE3, Path.CURVE3,
        Path.LINETO,
        Path.CURVE3, Path.CURVE3,
        Path.LINETO,
        Path.CLOSEPOLY,
    ]
    return Path(vertices, codes)


class MatplotlibSurface(DrawingSurface):
    """matplotlib(Agg) 로 래스터화하는 표면"""

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 dpi: Optional[int] = None):
        super().__init__(width, height)
        self.dpi = config.CHART_DPI if dpi is None else dpi
        self.fig = plt.figure(figsize=(self.width / self.dpi, self.height / self.dpi), dpi=self.dpi)
        self.ax = None
        self.clear()

    def _px_to_pt(self, value: float) -> float:
        return value * 72.0 / self.dpi

    def clear(self):
        self.fig.clf()
        self.fig.patch.set_facecolor('white')
        ax = self.fig.add_axes([0, 0, 1, 1])
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_autoscale_on(False)
        ax.axis('off')
        self.ax = ax

    def line(self, x1, y1, x2, y2, color, width=1):
        self.ax.plot([x1, x2], [y1, y2], color=color, linewidth=self._px_to_pt(width),
                     solid_capstyle='butt', zorder=1)

    def rounded_bar(self, x, y, width, height, radius, top_color, bottom_color):
        if width <= 0 or height <= 0:
            return
        patch = PathPatch(rounded_top_path(x, y, width, height, radius),
                          facecolor='none', edgecolor='none', transform=self.ax.transData)
        self.ax.add_patch(patch)

        cmap = LinearSegmentedColormap.from_list('bar', [top_color, bottom_color])
        gradient = np.linspace(0, 1, GRADIENT_STEPS).reshape(-1, 1)
        image = self.ax.imshow(gradient, cmap=cmap, aspect='auto', origin='upper',
                               extent=(x, x + width, y + height, y), interpolation='bilinear',
                               zorder=2)
        image.set_clip_path(patch)

    def text(self, x, y, text, color, size=11, align='center'):
        self.ax.text(x, y, text, color=color, fontsize=self._px_to_pt(size),
                     ha=align, va='baseline', family='sans-serif', zorder=3)

    def to_png(self) -> BytesIO:
        """현재 표면을 PNG 바이트 스트림으로 저장"""
        img_bytes = BytesIO()
        self.fig.savefig(img_bytes, format='png', dpi=self.dpi, facecolor=self.fig.get_facecolor())
        img_bytes.seek(0)
        return img_bytes

    def close(self):
        plt.close(self.fig)
