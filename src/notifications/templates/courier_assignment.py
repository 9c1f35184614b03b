"""Courier assignment template — sent to the courier picking up an order."""

from notifications.message_types import MessageType


class CourierAssignmentTemplate:
    message_type = MessageType.COURIER_ASSIGNMENT.value

    @staticmethod
    def render(context: dict) -> dict:
        return {
            "body": (
                "🛵 *NOVA ENTREGA ATRIBUÍDA*\n\n"
                f"📦 *Pedido:* {context.get('reference', 'N/A')}\n"
                f"👤 *Cliente:* {context.get('customer_name', '')}\n"
                f"📱 *Telefone:* {context.get('customer_phone', '')}\n"
                f"📍 *Endereço:* {context.get('address', '')}\n"
                f"💰 *Valor:* R$ {float(context.get('total', 0)):.2f}\n"
                f"⏱️ *Tempo estimado:* {context.get('estimated_time', '')}\n\n"
                "🏪 *Retirar no restaurante e entregar no endereço acima.*"
            ),
        }
