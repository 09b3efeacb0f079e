"""panetree 配置

配置分为以下几类：
- 布局配置：分割比例、占位 slot
- 导航配置：数字快捷键范围
- Web 配置：监听地址
- 日志配置
"""

import os

# === 布局配置 ===
DEFAULT_SPLIT_RATIO = 0.5  # 新 split 的初始比例
EMPTY_SLOT_ID = "empty"  # 零 pane 时的占位 slot id

# === 导航配置 ===
QUICK_NAV_MAX = 9  # pane 1..9 快捷键

# === Web 配置 ===
WEB_HOST = os.environ.get("PANETREE_HOST", "127.0.0.1")
WEB_PORT = int(os.environ.get("PANETREE_PORT", "8765"))

# === 日志配置 ===
LOG_LEVEL = os.environ.get("PANETREE_LOG_LEVEL", "INFO")  # 日志级别
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# === 指标配置 ===
METRICS_ENABLED = True  # 是否启用指标收集
