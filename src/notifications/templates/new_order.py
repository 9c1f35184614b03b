"""New order template — sent to the restaurant when a shopper checks out."""

from notifications.message_types import MessageType

PAYMENT_LABELS = {"pix": "PIX", "card": "Cartão de Crédito"}


def _money(amount) -> str:
    return f"R$ {float(amount):.2f}"


class NewOrderTemplate:
    message_type = MessageType.NEW_ORDER.value

    @staticmethod
    def render(context: dict) -> dict:
        lines = [
            f"🍔 *NOVO PEDIDO - {context.get('reference', 'N/A')}*",
            "",
            f"👤 *Cliente:* {context.get('customer_name', '')}",
            f"📱 *Telefone:* {context.get('customer_phone', '')}",
        ]

        if context.get("fulfillment_type") == "pickup":
            lines.append("🏪 *Retirada:* No balcão do restaurante")
        else:
            lines.append(f"📍 *Endereço de Entrega:* {context.get('delivery_address', '')}")

        lines += ["", "🛒 *Itens do Pedido:*"]
        for item in context.get("items", []):
            lines.append(f"• {item['quantity']}x {item['name']} - {_money(item['line_total'])}")
            if item.get("observation"):
                lines.append(f"  _Obs: {item['observation']}_")

        payment_method = context.get("payment_method", "")
        lines += [
            "",
            f"💰 *Total:* {_money(context.get('total', 0))}",
            f"💳 *Pagamento:* {PAYMENT_LABELS.get(payment_method, payment_method)}",
        ]
        if payment_method == "pix" and context.get("pix_key"):
            lines.append(f"🔑 *Chave PIX:* {context['pix_key']}")
        card = context.get("card")
        if payment_method == "card" and card:
            lines.append(f"🪪 *Titular:* {card['holder']} (final {card['last_digits']}, validade {card['expiry']})")

        lines += ["", f"⏰ *Horário:* {context.get('placed_at', '')}"]

        return {"body": "\n".join(lines)}
