# =============================================================================
# agent/prompt.py  -  The Agent's System Prompt
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the instruction that tells the LLM how to behave as a 1C
#   assistant.  The assistant always answers in Russian and must get every
#   number from a tool, never from memory.
#
# The tool list is rendered from the registry's ToolDescriptions and the name
# lists from the LookupStore, so the instruction follows the data.
# =============================================================================

from collections.abc import Iterable

from core.tool_definition import ToolDescription

_BASE_INSTRUCTION = """Ты дружелюбный и эффективный AI-ассистент для работы с системой 1С.
Твоя задача: отвечать на вопросы пользователя, используя предоставленные тебе
инструменты. Всегда отвечай на русском языке.

ПРАВИЛА
  • Любые цифры (остатки, задолженности) бери только из ответов инструментов.
  • Передавай название товара или контрагента так, как его назвал пользователь;
    регистр букв значения не имеет.
  • Если инструмент вернул ошибку с kind = "not_found", сообщи, что такой
    товар или контрагент не найден в базе, и попроси уточнить название.
    Не говори, что остаток или долг равен нулю.
  • Долг 0 означает, что контрагент ничего не должен.
"""


def get_assistant_prompt(
    tools: Iterable[ToolDescription] = (),
    products: Iterable[str] = (),
    counterparties: Iterable[str] = (),
) -> str:
    """Build the system instruction.

    Lists the available tools and the known product / counterparty names when
    given, so the model can match a loosely phrased request to an exact name.
    """
    prompt = _BASE_INSTRUCTION
    sections = (
        ("ИНСТРУМЕНТЫ", [f"{t.name}: {t.description}" for t in tools]),
        ("ТОВАРЫ В БАЗЕ", list(products)),
        ("КОНТРАГЕНТЫ В БАЗЕ", list(counterparties)),
    )
    for title, lines in sections:
        if lines:
            prompt += f"\n{title}\n" + "\n".join(f"  • {line}" for line in lines) + "\n"
    return prompt
