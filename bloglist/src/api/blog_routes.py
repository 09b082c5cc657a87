"""
Blog API Routes - RESTful Endpoints for Blogs

- GET    /api/blogs          → List all blogs
- GET    /api/blogs/stats    → Like and author statistics
- GET    /api/blogs/<id>     → Get single blog
- POST   /api/blogs          → Create blog (token required)
- PUT    /api/blogs/<id>     → Update likes
- DELETE /api/blogs/<id>     → Delete blog (token required, owner only)

Authentication:
Creating and deleting need a JWT in the Authorization header:
    Authorization: Bearer <token from POST /api/login>

Response Format:
    Success: the blog object, a list of blogs, or an empty 204 body
    Error:   { "error": "Error message" }

Each blog is returned with its owner expanded:
    {
        "id": 1,
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
        "user": {"id": 1, "username": "mluukkai", "name": "Matti Luukkainen"}
    }
"""

from flask import request, jsonify
from flask_jwt_extended import jwt_required, get_current_user

from bloglist.src.api import api_bp, error_response, server_error
from bloglist.src.services.blog_service import BlogService
from bloglist.src.utils.errors import BlogListError


@api_bp.route('/blogs', methods=['GET'])
def get_blogs():
    """
    List every blog.

    Success Response (200): JSON array of blogs
    Error Responses:
        500 - Server error
    """
    try:
        blogs = BlogService.get_all_blogs()
        return jsonify([blog.to_dict() for blog in blogs]), 200
    except Exception:
        return server_error('listing blogs')


@api_bp.route('/blogs/stats', methods=['GET'])
def get_blog_stats():
    """
    Aggregate statistics over all blogs.

    Success Response (200):
        {
            "total_likes": 36,
            "favorite_blog": {"title": "...", "author": "...", "likes": 12},
            "most_blogs": {"author": "Robert C. Martin", "blogs": 3},
            "most_likes": {"author": "Edsger W. Dijkstra", "likes": 17}
        }
    Each entry except total_likes is null when there are no blogs.
    """
    try:
        return jsonify(BlogService.get_stats()), 200
    except Exception:
        return server_error('computing blog stats')


@api_bp.route('/blogs/<blog_id>', methods=['GET'])
def get_blog(blog_id):
    """
    Error Responses:
        400 - Malformed id
        404 - Blog not found
    """
    try:
        blog = BlogService.get_blog(blog_id)
        return jsonify(blog.to_dict()), 200
    except BlogListError as e:
        return error_response(e)
    except Exception:
        return server_error(f'fetching blog {blog_id}')


@api_bp.route('/blogs', methods=['POST'])
@jwt_required()
def create_blog():
    """
    Create a blog owned by the token's user.

    Request Body (JSON):
        {
            "title": "Go To Statement Considered Harmful",   # Required
            "author": "Edsger W. Dijkstra",                  # Optional
            "url": "https://example.com/goto.html",          # Required
            "likes": 5                                       # Optional, defaults to 0
        }

    Success Response (201): the created blog
    Error Responses:
        400 - title or url missing, or likes invalid
        401 - Token missing or invalid
        500 - Server error
    """
    try:
        blog = BlogService.create_blog(request.get_json(silent=True), get_current_user())
        return jsonify(blog.to_dict()), 201
    except BlogListError as e:
        return error_response(e)
    except Exception:
        return server_error('creating blog')


@api_bp.route('/blogs/<blog_id>', methods=['PUT'])
def update_blog(blog_id):
    """
    Update a blog's like count.

    No token needed: anyone may like a blog.

    Request Body (JSON):
        { "likes": 8 }

    Success Response (200): the updated blog
    Error Responses:
        400 - Malformed id, or likes missing / not a non-negative integer
        404 - Blog not found
        500 - Server error
    """
    try:
        blog = BlogService.update_likes(blog_id, request.get_json(silent=True))
        return jsonify(blog.to_dict()), 200
    except BlogListError as e:
        return error_response(e)
    except Exception:
        return server_error(f'updating blog {blog_id}')


@api_bp.route('/blogs/<blog_id>', methods=['DELETE'])
@jwt_required()
def delete_blog(blog_id):
    """
    Delete a blog. Only the user who created it may delete it.

    Success Response (204): empty body
    Error Responses:
        400 - Malformed id
        401 - Token missing or invalid, or not the blog's creator
        404 - Blog not found
        500 - Server error
    """
    try:
        BlogService.delete_blog(blog_id, get_current_user())
        return '', 204
    except BlogListError as e:
        return error_response(e)
    except Exception:
        return server_error(f'deleting blog {blog_id}')
