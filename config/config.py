"""配置文件"""
import logging

# 计算核心参数
CALCULATOR_CONFIG = {
    "max_input_length": 1000,  # 超过则直接报 FormatError
    "strict_parentheses": False,  # True 时括号不匹配报错；默认保持宽松
}

# 聊天命令参数
BOT_CONFIG = {
    "command_prefix": "calc ",
    "reply_separator": "=",
}

# 批量计算参数
BATCH_CONFIG = {
    "output_path": "calc_results.csv",
    "comment_prefix": "#",  # 以此开头的行跳过
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert CALCULATOR_CONFIG["max_input_length"] > 0, "max_input_length 必须为正数"
    assert isinstance(CALCULATOR_CONFIG["strict_parentheses"], bool)
    assert BOT_CONFIG["command_prefix"], "命令前缀不能为空"
    assert BATCH_CONFIG["output_path"].endswith(".csv"), "批量结果只支持 CSV"
    logging.getLogger(__name__).info("Configuration validated successfully!")
