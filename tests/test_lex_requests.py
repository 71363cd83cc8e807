from bot_builder_core.domain_models import (
    BotDefinition,
    IntentDefinition,
    IntentRef,
    Message,
    plain_text_messages,
)
from bot_builder_core.lex_requests import (
    CLARIFICATION_MAX_ATTEMPTS,
    build_get_bot_request,
    build_put_bot_alias_request,
    build_put_bot_request,
    build_put_intent_request,
    parse_bot_definition,
    parse_intent_ref,
)


def test_plain_text_messages_preserva_orden():
    messages = plain_text_messages(["uno", "dos", "tres"])
    assert [m.content for m in messages] == ["uno", "dos", "tres"]
    assert all(m.content_type == "PlainText" for m in messages)


def test_put_bot_request_bot_nuevo():
    bot = BotDefinition(
        name="OrderFlowers",
        locale="en-US",
        child_directed=False,
        abort_messages=plain_text_messages(["Sorry, bye."]),
        clarification_messages=plain_text_messages(["Can you repeat?", "Say again?"]),
    )

    request = build_put_bot_request(bot)

    assert request == {
        "name": "OrderFlowers",
        "locale": "en-US",
        "childDirected": False,
        "clarificationPrompt": {
            "messages": [
                {"content": "Can you repeat?", "contentType": "PlainText"},
                {"content": "Say again?", "contentType": "PlainText"},
            ],
            "maxAttempts": 5,
        },
        "abortStatement": {
            "messages": [{"content": "Sorry, bye.", "contentType": "PlainText"}],
        },
    }
    assert CLARIFICATION_MAX_ATTEMPTS == 5


def test_put_bot_request_incluye_checksum_e_intents():
    bot = BotDefinition(
        name="OrderFlowers",
        locale="en-US",
        child_directed=True,
        intents=[IntentRef("Greet", "1"), IntentRef("Order", "$LATEST")],
        checksum="abc-123",
    )

    request = build_put_bot_request(bot)

    assert request["checksum"] == "abc-123"
    assert request["intents"] == [
        {"intentName": "Greet", "intentVersion": "1"},
        {"intentName": "Order", "intentVersion": "$LATEST"},
    ]
    assert request["childDirected"] is True


def test_put_bot_alias_request_usa_nombre_del_bot():
    assert build_put_bot_alias_request("OrderFlowers") == {
        "name": "OrderFlowers",
        "botName": "OrderFlowers",
        "botVersion": "$LATEST",
    }


def test_get_bot_request():
    assert build_get_bot_request("OrderFlowers", "prod") == {
        "name": "OrderFlowers",
        "versionOrAlias": "prod",
    }


def test_put_intent_request_return_intent():
    intent = IntentDefinition(
        name="OrderStatus",
        conclusion_messages=[Message("Your order is on its way.")],
        sample_utterances=["where is my order", "order status"],
    )

    assert build_put_intent_request(intent) == {
        "name": "OrderStatus",
        "conclusionStatement": {
            "messages": [{"content": "Your order is on its way.", "contentType": "PlainText"}],
        },
        "sampleUtterances": ["where is my order", "order status"],
        "fulfillmentActivity": {"type": "ReturnIntent"},
    }


def test_parse_bot_definition_sin_intents():
    bot = parse_bot_definition(
        {
            "name": "OrderFlowers",
            "locale": "en-US",
            "childDirected": False,
            "checksum": "chk-1",
            "version": "$LATEST",
        }
    )

    assert bot.intents == []
    assert bot.abort_messages == []
    assert bot.checksum == "chk-1"


def test_parse_bot_definition_completo():
    bot = parse_bot_definition(
        {
            "name": "OrderFlowers",
            "locale": "de-DE",
            "childDirected": True,
            "checksum": "chk-2",
            "intents": [{"intentName": "Greet", "intentVersion": "2"}],
            "abortStatement": {"messages": [{"content": "Bye", "contentType": "PlainText"}]},
            "clarificationPrompt": {
                "messages": [{"content": "Hm?", "contentType": "PlainText"}],
                "maxAttempts": 5,
            },
        }
    )

    assert bot.locale == "de-DE"
    assert bot.child_directed is True
    assert bot.intents == [IntentRef("Greet", "2")]
    assert bot.abort_messages == [Message("Bye")]
    assert bot.clarification_messages == [Message("Hm?")]


def test_parse_intent_ref():
    ref = parse_intent_ref({"name": "OrderStatus", "version": "3", "checksum": "x"})
    assert ref == IntentRef("OrderStatus", "3")
