"""
core/i18n.py
Wizard strings in English and Simplified Chinese.
Usage:
    from core.i18n import Translator, detect_locale
    tr = Translator(detect_locale())
    tr.t("provider_config_saved", provider="openai")

Lookup order: active locale → "en" → the raw key.
Locale detection: CLAW_SETUP_LANG env var → LANG / LANGUAGE → "en"
"""

from __future__ import annotations

import os

DEFAULT_LOCALE = "en"
LOCALES = {
    "en": "English",
    "zh_CN": "简体中文",
}


def normalize_locale(lang: str) -> str:
    return "zh_CN" if lang.lower().startswith("zh") else DEFAULT_LOCALE


def detect_locale() -> str:
    """Returns 'en' or 'zh_CN'."""
    lang = os.environ.get("CLAW_SETUP_LANG", "")
    if lang:
        return normalize_locale(lang)
    lang = os.environ.get("LANG") or os.environ.get("LANGUAGE") or ""
    return normalize_locale(lang)


# ── Translation tables ───────────────────────────────────────────────────────

_STRINGS = {
    # ── Startup ──────────────────────────────────────────────────────────
    "select_language":   {"en": "Language / 语言"},
    "welcome":           {"en": "OpenClaw provider setup",
                          "zh_CN": "OpenClaw 模型供应商配置"},
    "checking_openclaw": {"en": "Looking for openclaw…",
                          "zh_CN": "正在查找 openclaw…"},
    "openclaw_found":    {"en": "openclaw found: {path}",
                          "zh_CN": "已找到 openclaw：{path}"},
    "openclaw_not_found": {"en": "openclaw not found. Install it first: npm install -g openclaw",
                           "zh_CN": "未找到 openclaw，请先安装：npm install -g openclaw"},
    "cancelled":         {"en": "Cancelled.",              "zh_CN": "已取消。"},
    "goodbye":           {"en": "Bye!",                    "zh_CN": "再见！"},
    "unexpected_error":  {"en": "Unexpected error: {error}",
                          "zh_CN": "发生意外错误：{error}"},

    # ── Top-level menu ───────────────────────────────────────────────────
    "config_action_prompt": {"en": "What would you like to do?",
                             "zh_CN": "请选择操作："},
    "config_action_add":    {"en": "Add provider",          "zh_CN": "添加供应商"},
    "config_action_status": {"en": "Show current configuration",
                             "zh_CN": "查看当前配置"},
    "config_action_exit":   {"en": "Exit",                  "zh_CN": "退出"},

    # ── Configure provider ───────────────────────────────────────────────
    "select_vendor":     {"en": "Select vendor:",          "zh_CN": "选择服务商："},
    "vendor_packycode":  {"en": "PackyCode",               "zh_CN": "PackyCode"},
    "vendor_other":      {"en": "Other (custom base URL)", "zh_CN": "其他（自定义 Base URL）"},
    "input_base_url":    {"en": "Base URL:",               "zh_CN": "Base URL："},
    "fetching_models":   {"en": "Fetching models…",        "zh_CN": "正在获取模型列表…"},
    "fetching_models_done": {"en": "{count} models available",
                             "zh_CN": "共 {count} 个可用模型"},
    "fetching_models_failed": {"en": "Failed to fetch models",
                               "zh_CN": "获取模型列表失败"},
    "no_models_available": {"en": "No models available for this vendor",
                            "zh_CN": "该服务商没有可用模型"},
    "select_model":      {"en": "Select model:",           "zh_CN": "选择模型："},
    "saving_provider_config": {"en": "Saving provider config…",
                               "zh_CN": "正在保存供应商配置…"},
    "provider_config_saved":  {"en": "Provider {provider} configured",
                               "zh_CN": "已配置供应商 {provider}"},
    "provider_config_failed": {"en": "Failed to save provider config",
                               "zh_CN": "保存供应商配置失败"},
    "input_api_key":     {"en": "API key for {provider}:",
                          "zh_CN": "{provider} 的 API Key："},
    "saving_api_key":    {"en": "Saving API key…",         "zh_CN": "正在保存 API Key…"},
    "api_key_saved":     {"en": "API key saved for {provider}",
                          "zh_CN": "已保存 {provider} 的 API Key"},
    "api_key_failed":    {"en": "Failed to save API key",  "zh_CN": "保存 API Key 失败"},
    "api_key_partial":   {"en": "Provider {provider} is configured without a key. Run the wizard again to add one.",
                          "zh_CN": "供应商 {provider} 已配置但缺少 API Key，请重新运行向导添加。"},
    "set_primary_model": {"en": "Use {model} as the default model?",
                          "zh_CN": "将 {model} 设为默认模型？"},
    "primary_model_saved": {"en": "Default model set to {model}",
                            "zh_CN": "默认模型已设为 {model}"},
    "primary_model_failed": {"en": "Failed to set default model",
                             "zh_CN": "设置默认模型失败"},

    # ── Status ───────────────────────────────────────────────────────────
    "status_config_path": {"en": "Config: {path}",         "zh_CN": "配置文件：{path}"},
    "status_providers":  {"en": "Providers",               "zh_CN": "供应商"},
    "status_base_url":   {"en": "Base URL",                "zh_CN": "Base URL"},
    "status_api_key":    {"en": "API key",                 "zh_CN": "API Key"},
    "status_no_providers": {"en": "No providers configured yet.",
                            "zh_CN": "尚未配置任何供应商。"},
    "status_primary":    {"en": "Default model: {model}",  "zh_CN": "默认模型：{model}"},
    "status_models":     {"en": "Registered models: {models}",
                          "zh_CN": "已登记模型：{models}"},
    "status_none":       {"en": "(none)",                  "zh_CN": "（无）"},
    "status_read_failed": {"en": "Cannot read config",     "zh_CN": "无法读取配置"},
}


class Translator:
    """Looks up wizard strings for one locale."""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale if locale in LOCALES else normalize_locale(locale)

    def t(self, key: str, **params) -> str:
        entry = _STRINGS.get(key)
        if not entry:
            return key
        text = entry.get(self.locale) or entry.get(DEFAULT_LOCALE) or key
        for name, value in params.items():
            text = text.replace("{" + name + "}", str(value))
        return text

    __call__ = t
