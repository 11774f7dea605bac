import math
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from campusnet.api.deps import get_db
from campusnet.api.auth.auth import get_current_active_user
from campusnet.crud import comment_crud, post_crud
from campusnet.exceptions import NotFoundError
from campusnet.schemas import post_schema
from campusnet.schemas.auth_schema import AuthenticatedUser
from campusnet.services import post_service
from campusnet.services.engagement_service import EntityKind

router = APIRouter()


def _pagination(page: int, limit: int, total: int) -> post_schema.Pagination:
    return post_schema.Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit))


# ----------------- Posts -----------------
@router.post(
    "",
    response_model=post_schema.PostRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
)
def create_post(
    post_in: post_schema.PostCreate,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    """
    Media is referenced by URL; uploading the file is handled elsewhere.
    """
    return post_crud.create_post(db, author_id=current_user.user_id, post=post_in)


@router.get("", response_model=post_schema.PostPage, summary="List posts, newest first")
def get_all_posts(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    posts = post_crud.get_posts(db, skip=(page - 1) * limit, limit=limit)
    return post_schema.PostPage(
        posts=[post_schema.PostRead.model_validate(post) for post in posts],
        pagination=_pagination(page, limit, post_crud.count_posts(db)),
    )


@router.get("/{post_id}", response_model=post_schema.PostDetail, summary="Get a post with its comments")
def get_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    db_post = post_crud.get_post_with_comments(db, post_id)
    if db_post is None:
        raise NotFoundError("Post", post_id)
    return db_post


@router.put("/{post_id}", response_model=post_schema.PostRead, summary="Edit my post")
def update_post(
    post_id: int,
    post_update: post_schema.PostUpdate,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    return post_service.update_post(db, current_user, post_id, post_update)


@router.delete("/{post_id}", response_model=dict, summary="Delete my post")
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    post_service.delete_post(db, current_user, post_id)
    return {"message": "Post deleted successfully"}


@router.post("/{post_id}/like", response_model=post_schema.LikeToggleResult, summary="Like or unlike a post")
def like_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    liked, likes = post_service.like_entity(db, current_user, EntityKind.post, post_id)
    return post_schema.LikeToggleResult(liked=liked, likes=likes, message="Post liked" if liked else "Post unliked")


# ----------------- Comments -----------------
@router.post(
    "/{post_id}/comments",
    response_model=post_schema.CommentRead,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a post",
)
def create_comment(
    post_id: int,
    comment_in: post_schema.CommentCreate,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    return post_service.create_comment(db, current_user, post_id, comment_in)


@router.get("/{post_id}/comments", response_model=post_schema.CommentPage, summary="List the comments of a post")
def get_comments_by_post_id(
    post_id: int,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    if post_crud.get_post(db, post_id) is None:
        raise NotFoundError("Post", post_id)
    comments = comment_crud.get_comments_by_post_id(db, post_id, skip=(page - 1) * limit, limit=limit)
    return post_schema.CommentPage(
        comments=[post_schema.CommentRead.model_validate(comment) for comment in comments],
        pagination=_pagination(page, limit, comment_crud.count_comments_by_post_id(db, post_id)),
    )


@router.put("/comments/{comment_id}", response_model=post_schema.CommentRead, summary="Edit my comment")
def update_comment(
    comment_id: int,
    comment_update: post_schema.CommentUpdate,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    return post_service.update_comment(db, current_user, comment_id, comment_update)


@router.delete("/comments/{comment_id}", response_model=dict, summary="Delete my comment")
def delete_comment(
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    comment_count = post_service.delete_comment(db, current_user, comment_id)
    return {"message": "Comment deleted successfully", "comment_count": comment_count}


@router.post(
    "/comments/{comment_id}/like",
    response_model=post_schema.LikeToggleResult,
    summary="Like or unlike a comment",
)
def like_comment(
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: AuthenticatedUser = Depends(get_current_active_user),
):
    liked, likes = post_service.like_entity(db, current_user, EntityKind.comment, comment_id)
    return post_schema.LikeToggleResult(liked=liked, likes=likes, message="Comment liked" if liked else "Comment unliked")
