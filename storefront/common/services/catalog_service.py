from typing import Dict, List, Optional
from sqlalchemy import and_, or_, select
from ..db.session import get_session, translate_errors
from ..errors import NotFoundError, ValidationError
from ..models.category import Category
from ..models.department import Department
from ..models.product import Product
from ..models.product_category import ProductCategory
from ..utils.dto import to_product_dto
from ..utils.pagination import normalize_paging, page_offset


def _category_dto(row: Category) -> Dict:
    return {
        "category_id": row.category_id,
        "name": row.name,
        "description": row.description,
        "department_id": row.department_id,
    }


def _department_dto(row: Department) -> Dict:
    return {"department_id": row.department_id, "name": row.name, "description": row.description}


class CatalogService:
    """Catalog querying service.

    Responsibilities:
    - List/search products with pagination, optionally restricted to a category or department
    - Get single product detail
    - Departments and categories lookups
    """

    category_sort_columns = {"category_id": Category.category_id, "name": Category.name}

    def __init__(self, session_factory=get_session, *, page_size: int = 20, max_page_size: int = 100, description_length: int = 200):
        self._session_factory = session_factory
        self._page_size = page_size
        self._max_page_size = max_page_size
        self._description_length = description_length

    def _paginate(self, q, page: Optional[int], limit: Optional[int], description_length: Optional[int]) -> Dict:
        p, ps = normalize_paging(page, limit, self._max_page_size, self._page_size)
        length = description_length or self._description_length
        total = q.count()
        rows = q.order_by(Product.product_id).offset(page_offset(p, ps)).limit(ps).all()
        return {
            "paginationMeta": {
                "currentPage": p,
                "currentPageSize": len(rows),
                "totalPages": (total + ps - 1) // ps,
                "totalRecords": total,
            },
            "count": total,
            "rows": [to_product_dto(r, length) for r in rows],
        }

    def list_products(self, *, page: Optional[int] = None, limit: Optional[int] = None, description_length: Optional[int] = None) -> Dict:
        with translate_errors("catalog.list_products"), self._session_factory() as session:
            return self._paginate(session.query(Product), page, limit, description_length)

    def search_products(
        self,
        *,
        query_string: str,
        all_words: bool = True,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        description_length: Optional[int] = None,
    ) -> Dict:
        """Match words of ``query_string`` against name and description.

        ``all_words`` requires every word to appear; otherwise any word matches.
        """
        words = [w for w in (query_string or "").split() if w]
        if not words:
            raise ValidationError("The field query_string must not be empty", field="query_string")
        clauses = []
        for w in words:
            like = f"%{w}%"
            clauses.append(or_(Product.name.ilike(like), Product.description.ilike(like)))
        criterion = and_(*clauses) if all_words else or_(*clauses)
        with translate_errors("catalog.search_products"), self._session_factory() as session:
            return self._paginate(session.query(Product).filter(criterion), page, limit, description_length)

    def products_in_category(self, category_id: int, *, page: Optional[int] = None, limit: Optional[int] = None, description_length: Optional[int] = None) -> Dict:
        with translate_errors("catalog.products_in_category"), self._session_factory() as session:
            if session.get(Category, category_id) is None:
                raise NotFoundError(f"Category {category_id} does not exist", code="CAT_01", field="category_id")
            q = (
                session.query(Product)
                .join(ProductCategory, ProductCategory.product_id == Product.product_id)
                .filter(ProductCategory.category_id == category_id)
            )
            return self._paginate(q, page, limit, description_length)

    def products_in_department(self, department_id: int, *, page: Optional[int] = None, limit: Optional[int] = None, description_length: Optional[int] = None) -> Dict:
        with translate_errors("catalog.products_in_department"), self._session_factory() as session:
            if session.get(Department, department_id) is None:
                raise NotFoundError(f"Department {department_id} does not exist", code="DEP_02", field="department_id")
            product_ids = (
                select(ProductCategory.product_id)
                .join(Category, Category.category_id == ProductCategory.category_id)
                .where(Category.department_id == department_id)
            )
            q = session.query(Product).filter(Product.product_id.in_(product_ids))
            return self._paginate(q, page, limit, description_length)

    def get_product(self, product_id: int) -> Dict:
        with translate_errors("catalog.get_product"), self._session_factory() as session:
            r = session.get(Product, product_id)
            if not r:
                raise NotFoundError(f"Product {product_id} does not exist", code="PRO_01", field="product_id")
            # full description on the detail view
            return to_product_dto(r, len(r.description or ""))

    def list_departments(self) -> List[Dict]:
        with translate_errors("catalog.list_departments"), self._session_factory() as session:
            return [_department_dto(d) for d in session.query(Department).order_by(Department.department_id).all()]

    def get_department(self, department_id: int) -> Dict:
        with translate_errors("catalog.get_department"), self._session_factory() as session:
            d = session.get(Department, department_id)
            if not d:
                raise NotFoundError(f"Department {department_id} does not exist", code="DEP_02", field="department_id")
            return _department_dto(d)

    def list_categories(self, *, order: Optional[str] = None, page: Optional[int] = None, limit: Optional[int] = None) -> Dict:
        column = self.category_sort_columns.get(order or "category_id")
        if column is None:
            raise ValidationError("The field of order is not allow sorting", code="PAG_02", field="order")
        p, ps = normalize_paging(page, limit, self._max_page_size, self._page_size)
        with translate_errors("catalog.list_categories"), self._session_factory() as session:
            q = session.query(Category)
            total = q.count()
            rows = q.order_by(column).offset(page_offset(p, ps)).limit(ps).all()
            return {"count": total, "rows": [_category_dto(c) for c in rows]}

    def get_category(self, category_id: int) -> Dict:
        with translate_errors("catalog.get_category"), self._session_factory() as session:
            c = session.get(Category, category_id)
            if not c:
                raise NotFoundError(f"Category {category_id} does not exist", code="CAT_01", field="category_id")
            return _category_dto(c)

    def categories_in_department(self, department_id: int) -> List[Dict]:
        with translate_errors("catalog.categories_in_department"), self._session_factory() as session:
            if session.get(Department, department_id) is None:
                raise NotFoundError(f"Department {department_id} does not exist", code="DEP_02", field="department_id")
            rows = (
                session.query(Category)
                .filter(Category.department_id == department_id)
                .order_by(Category.category_id)
                .all()
            )
            return [_category_dto(c) for c in rows]

    def categories_of_product(self, product_id: int) -> List[Dict]:
        with translate_errors("catalog.categories_of_product"), self._session_factory() as session:
            if session.get(Product, product_id) is None:
                raise NotFoundError(f"Product {product_id} does not exist", code="PRO_01", field="product_id")
            rows = (
                session.query(Category)
                .join(ProductCategory, ProductCategory.category_id == Category.category_id)
                .filter(ProductCategory.product_id == product_id)
                .order_by(Category.category_id)
                .all()
            )
            return [{"category_id": c.category_id, "department_id": c.department_id, "name": c.name} for c in rows]
