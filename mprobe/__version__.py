__title__ = "mprobe"
__description__ = "Command-line tool to download serialized manga pages by probing chapter URLs"
__version__ = "0.1.0"
__license__ = "GPLv3"
__intro__ = r"""
               _____           _
  _ __ ___    |  __ \_ __ ___ | |__   ___
 | '_ ` _ \   | |__) | '__/ _ \| '_ \ / _ \
 | | | | | |  |  ___/| | | (_) | |_) |  __/
 |_| |_| |_|  |_|    |_|  \___/|_.__/ \___|
"""
