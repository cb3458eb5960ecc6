from enum import Enum


class AmortizationMethod(str, Enum):
    SAC = "sac"  # 等额本金
    PRICE = "price"  # 等额本息

    @property
    def label(self) -> str:
        return {
            "sac": "SAC (amortização constante)",
            "price": "PRICE (parcela fixa)",
        }[self.value]


# 列定义
AMORTIZATION_COLUMNS = [
    "period", "installment", "interest", "principal_paid", "insurance",
    "balance", "cumulative_principal", "cumulative_interest",
]

GROWTH_COLUMNS = [
    "period", "period_fraction", "amount", "invested",
    "interest_accrued", "period_interest",
]

SUMMARY_LABELS = {
    "total_paid": "Total pago",
    "total_interest": "Total de juros",
    "total_insurance": "Total de seguro",
    "first_installment": "Primeira parcela",
    "last_installment": "Última parcela",
    "effective_annual_rate": "Custo efetivo anual (%)",
}
