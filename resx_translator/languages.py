"""Display names for the culture codes used in resource file names."""

LANGUAGE_NAMES = {
    "ar": "Arabic",
    "az": "Azerbaijani",
    "be-BY": "Belarusian",
    "bg-BG": "Bulgarian",
    "bn-BD": "Bengali (Bangladesh)",
    "cs-CZ": "Czech (Czech Republic)",
    "da-DK": "Danish (Denmark)",
    "de": "German",
    "de-DE": "German (Germany)",
    "el-GR": "Greek (Greece)",
    "en": "English",
    "en-US": "English (United States)",
    "es": "Spanish",
    "es-ES": "Spanish (Spain)",
    "et-EE": "Estonian (Estonia)",
    "fa-IR": "Persian",
    "fil-PH": "Filipino (Philippines)",
    "fi-FI": "Finnish (Finland)",
    "fr": "French",
    "fr-FR": "French (France)",
    "he-IL": "Hebrew (Israel)",
    "hi-IN": "Hindi (India)",
    "hu-HU": "Hungarian (Hungary)",
    "hy-AM": "Armenian",
    "id-ID": "Indonesian (Indonesia)",
    "it": "Italian",
    "it-IT": "Italian (Italy)",
    "ja-JP": "Japanese (Japan)",
    "ka-GE": "Georgian (Georgia)",
    "kk-KZ": "Kazakh (Kazakhstan)",
    "ko-KR": "Korean (South Korea)",
    "ky-KG": "Kyrgyz (Kyrgyzstan)",
    "lt-LT": "Lithuanian (Lithuania)",
    "lv-LV": "Latvian (Latvia)",
    "ms-MY": "Malay (Malaysia)",
    "my-MM": "Burmese (Myanmar)",
    "nb-NO": "Norwegian Bokmål (Norway)",
    "nl-NL": "Dutch (Netherlands)",
    "pl-PL": "Polish (Poland)",
    "pt-PT": "Portuguese (Portugal)",
    "ro": "Romanian",
    "ro-RO": "Romanian (Romania)",
    "ru-RU": "Russian (Russia)",
    "sk-SK": "Slovak (Slovakia)",
    "sl-SI": "Slovenian (Slovenia)",
    "sv-SE": "Swedish (Sweden)",
    "sw-KE": "Swahili (Kenya)",
    "syr-SY": "Syriac (Syria)",
    "ta-IN": "Tamil (India)",
    "te-IN": "Telugu (India)",
    "th-TH": "Thai (Thailand)",
    "tr-TR": "Turkish (Turkey)",
    "tt-RU": "Tatar (Russia)",
    "uk-UA": "Ukrainian (Ukraine)",
    "ur-PK": "Urdu (Pakistan)",
    "uz-UZ": "Uzbek (Uzbekistan)",
    "vi-VN": "Vietnamese (Vietnam)",
    "zh-CHS": "Chinese (Simplified, China)",
    "zh-CN": "Chinese (Simplified, Mainland China)",
    "zh-TW": "Chinese (Traditional, Taiwan)",
}


def display_name(code: str) -> str:
    """Human readable name for a culture code, or the code itself if unknown."""
    return LANGUAGE_NAMES.get(code, code)
