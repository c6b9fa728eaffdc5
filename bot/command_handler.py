"""聊天命令处理 - 识别命令前缀、计算表达式、生成回复文本（不含网络部分）"""
import logging

from config.config import BOT_CONFIG
from core.calculator import evaluate_expression
from utils.formatting import format_result, strip_whitespace

logger = logging.getLogger(__name__)


class CommandHandler:
    """把一条聊天消息转换为回复；不是计算命令的消息返回 None"""

    def __init__(self, prefix=None, separator=None, strict=None):
        self.prefix = prefix if prefix is not None else BOT_CONFIG['command_prefix']
        self.separator = separator if separator is not None else BOT_CONFIG['reply_separator']
        self.strict = strict

    def is_command(self, text):
        return bool(text) and text.startswith(self.prefix)

    def handle(self, text):
        if not self.is_command(text):
            return None

        expression = text[len(self.prefix):]
        result = evaluate_expression(strip_whitespace(expression), strict=self.strict)

        if not result.ok:
            logger.info(f"Rejected expression {expression!r}: {result.error.message}")
            return result.error.message
        return f"{expression}{self.separator}{format_result(result.value)}"


def run_session(messages, handler=None):
    """依次处理消息流，产出每条命令的回复"""
    handler = handler or CommandHandler()
    for message in messages:
        reply = handler.handle(message.rstrip('\r\n'))
        if reply is not None:
            yield reply
