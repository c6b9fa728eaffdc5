"""聊天机器人模块"""
from .command_handler import CommandHandler, run_session

__all__ = ['CommandHandler', 'run_session']
