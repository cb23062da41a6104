# tests/core/test_messages.py

from restobar.core import messages


def test_resolve_locale():
    assert messages.resolve_locale(None) == "es"
    assert messages.resolve_locale("en-US,en;q=0.9") == "en"
    assert messages.resolve_locale("fr-FR, es;q=0.8") == "es"
    assert messages.resolve_locale("de") == "es"


def test_message_with_labels():
    assert messages.message("es", "created", label="Área") == "Área registrado correctamente."
    assert messages.message("en", "listed", label_plural="Areas") == "Areas list."


def test_unknown_locale_falls_back_to_default():
    assert messages.message("pt", "unauthorized") == "Esta acción no está autorizada."


def test_field_error_uses_attribute_label():
    assert messages.field_error("es", "missing", "idCategory") == "El campo categoría es obligatorio."
    assert messages.field_error("en", "less_than_equal", "quantity", le=1000000) == (
        "The quantity field must not be greater than 1000000."
    )
    # 알 수 없는 오류 타입은 일반 메시지를 사용합니다.
    assert messages.field_error("en", "weird_type", "name") == "The name field is invalid."
