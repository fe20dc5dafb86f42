"""Entity to response DTO conversion shared by use cases and routes."""

from collections.abc import Sequence

from gestpro.application.dto.responses import (
    CategoryResponse,
    ClientResponse,
    DashboardStatsResponse,
    InvoiceItemResponse,
    InvoiceResponse,
    ProductResponse,
    SaleResponse,
    SettlementResponse,
    StockAdjustmentResponse,
    TopProductResponse,
)
from gestpro.core.entities import (
    Category,
    CatalogItem,
    Client,
    DashboardStats,
    Invoice,
    InvoiceItem,
    Product,
    Sale,
    StockAdjustment,
)


def client_to_response(client: Client) -> ClientResponse:
    return ClientResponse(
        id=client.id,  # type: ignore[arg-type]
        name=client.name,
        email=client.email,
        phone=client.phone,
        address=client.address,
        company=client.company,
        created_at=client.created_at,
    )


def category_to_response(category: Category) -> CategoryResponse:
    return CategoryResponse(
        id=category.id,  # type: ignore[arg-type]
        name=category.name,
        description=category.description,
        created_at=category.created_at,
    )


def product_to_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price_ht=product.price_ht,
        stock=product.stock,
        category_id=product.category_id,
        created_at=product.created_at,
    )


def item_to_response(item: InvoiceItem) -> InvoiceItemResponse:
    return InvoiceItemResponse(
        id=item.id,  # type: ignore[arg-type]
        kind=item.kind,
        product_id=item.product_id if isinstance(item, CatalogItem) else None,
        product_name=item.product_name,
        quantity=item.quantity,
        price_ht=item.price_ht,
        total_ht=item.total_ht,
    )


def sale_to_response(sale: Sale) -> SaleResponse:
    return SaleResponse(
        id=sale.id,  # type: ignore[arg-type]
        invoice_id=sale.invoice_id,
        product_id=sale.product_id,
        quantity=sale.quantity,
        unit_price=sale.unit_price,
        total=sale.total,
        created_at=sale.created_at,
    )


def settlement_to_response(
    adjustments: Sequence[StockAdjustment], sales: Sequence[Sale]
) -> SettlementResponse:
    return SettlementResponse(
        stock_adjustments=[
            StockAdjustmentResponse(
                product_id=a.product_id,
                quantity=a.quantity,
                applied=a.applied,
                stock_after=a.stock_after,
            )
            for a in adjustments
        ],
        sales=[sale_to_response(s) for s in sales],
    )


def invoice_to_response(
    invoice: Invoice, settlement: SettlementResponse | None = None
) -> InvoiceResponse:
    """Convert an Invoice entity, including items and client when loaded."""
    return InvoiceResponse(
        id=invoice.id,  # type: ignore[arg-type]
        number=invoice.number,
        client_id=invoice.client_id,
        status=invoice.status.value,
        total_ht=invoice.total_ht,
        tva_rate=invoice.tva_rate,
        total_tva=invoice.total_tva,
        total_ttc=invoice.total_ttc,
        due_date=invoice.due_date,
        notes=invoice.notes,
        items=[item_to_response(item) for item in invoice.items],
        client=client_to_response(invoice.client) if invoice.client else None,
        settlement=settlement,
        created_at=invoice.created_at,
    )


def stats_to_response(stats: DashboardStats) -> DashboardStatsResponse:
    return DashboardStatsResponse(
        revenue=stats.revenue,
        invoice_count=stats.invoice_count,
        client_count=stats.client_count,
        product_count=stats.product_count,
        recent_invoices=[invoice_to_response(inv) for inv in stats.recent_invoices],
        top_products=[
            TopProductResponse(
                product=product_to_response(tp.product),
                sales_count=tp.sales_count,
            )
            for tp in stats.top_products
        ],
        low_stock_products=[product_to_response(p) for p in stats.low_stock_products],
    )
