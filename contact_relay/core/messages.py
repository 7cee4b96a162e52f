"""
User-facing copy for the contact form.

Only validation messages, the delivery failure message, the default subject and
the labels of the HTML mail are localized. Generic envelope errors
("Not found", "Bot verification failed", ...) stay in English.
"""

from typing import Dict

DEFAULT_LOCALE = "ja"

MESSAGES: Dict[str, Dict[str, str]] = {
    "ja": {
        "default_subject": "お問い合わせ",
        "name_invalid": "お名前は2文字以上で入力してください。",
        "email_invalid": "メールアドレスの形式が正しくありません。",
        "subject_missing": "件名を選択してください。",
        "message_too_short": "メッセージは10文字以上で入力してください。",
        "token_missing": "検証トークンが取得できませんでした。",
        "delivery_failed": "メール送信に失敗しました。時間をおいて再度お試しください。",
        "html_lang": "ja",
        "html_intro": "新しいお問い合わせが届きました。",
        "label_name": "お名前",
        "label_email": "メール",
        "label_phone": "電話",
        "label_subject": "件名",
        "label_budget": "ご予算",
        "label_deadline": "希望納期",
        "label_message": "メッセージ",
    },
    "en": {
        "default_subject": "Contact",
        "name_invalid": "Please enter a name of at least 2 characters.",
        "email_invalid": "The email address is not valid.",
        "subject_missing": "Please choose a subject.",
        "message_too_short": "Please enter a message of at least 10 characters.",
        "token_missing": "The verification token could not be obtained.",
        "delivery_failed": "Sending the email failed. Please try again later.",
        "html_lang": "en",
        "html_intro": "A new contact request has arrived.",
        "label_name": "Name",
        "label_email": "Email",
        "label_phone": "Phone",
        "label_subject": "Subject",
        "label_budget": "Budget",
        "label_deadline": "Deadline",
        "label_message": "Message",
    },
}

# Envelope errors
INVALID_PAYLOAD = "Invalid JSON payload"
NOT_FOUND = "Not found"
METHOD_NOT_ALLOWED = "Method not allowed"
BOT_VERIFICATION_FAILED = "Bot verification failed"
INTERNAL_ERROR = "Internal server error"


def get_messages(locale: str) -> Dict[str, str]:
    """Return the catalogue for `locale`, falling back to Japanese."""
    return MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])


def get_message(key: str, locale: str = DEFAULT_LOCALE) -> str:
    return get_messages(locale)[key]
