"""Article routes: public reading and admin editing."""
from fastapi import APIRouter, Depends

from vaqmas.api.deps import get_context, require_admin
from vaqmas.models.article import ArticleForm
from vaqmas.services.firestore_collection import FirestoreCollection

router = APIRouter(prefix="/articles", tags=["articles"])
admin_router = APIRouter(prefix="/admin/articles", tags=["admin_articles"])


def _articles(context):
    return FirestoreCollection(context.db, "articles")


@router.get("/")
def list_articles(limit: int = 20, context=Depends(get_context)):
    return {"items": _articles(context).list(order_by="publishedAt", limit=limit)}


@router.get("/{article_id}")
def get_article(article_id: str, context=Depends(get_context)):
    return _articles(context).get(article_id)


@admin_router.post("/", status_code=201)
def create_article(form: ArticleForm, user=Depends(require_admin), context=Depends(get_context)):
    created = _articles(context).create(form.to_firestore())
    context.notifications.success(f"Artículo '{form.title}' creado")
    return created


@admin_router.put("/{article_id}")
def update_article(article_id: str, form: ArticleForm, user=Depends(require_admin), context=Depends(get_context)):
    updated = _articles(context).update(article_id, form.to_firestore())
    context.notifications.success(f"Artículo '{form.title}' actualizado")
    return updated


@admin_router.delete("/{article_id}")
def delete_article(article_id: str, user=Depends(require_admin), context=Depends(get_context)):
    _articles(context).delete(article_id)
    context.notifications.success("Artículo eliminado")
    return {"id": article_id, "deleted": True}
