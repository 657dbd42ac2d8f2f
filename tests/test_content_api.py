def create_post(admin_client, slug="launch", **extra):
    payload = dict(title="Launch", slug=slug, content="<p>We launched</p>", excerpt="We launched", **extra)
    response = admin_client.post("/api/blog-posts", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_admin_creates_post(admin_client, admin_user):
    post = create_post(admin_client, isPublished=True)
    assert post["authorId"] == admin_user.id
    assert post["publishedAt"] is not None


def test_duplicate_slug(admin_client):
    create_post(admin_client)
    response = admin_client.post("/api/blog-posts", json={
        "title": "Again", "slug": "launch", "content": "x", "excerpt": "x",
    })
    assert response.status_code == 409


def test_invalid_slug(admin_client):
    response = admin_client.post("/api/blog-posts", json={
        "title": "Bad", "slug": "Not A Slug", "content": "x", "excerpt": "x",
    })
    assert response.status_code == 400


def test_public_reads(admin_client, anon_client):
    draft = create_post(admin_client, slug="draft")
    live = create_post(admin_client, slug="live", isPublished=True)

    body = anon_client.get("/api/blog-posts", params={"published": "true"}).json()
    assert body["total"] == 1
    assert [p["slug"] for p in body["posts"]] == ["live"]

    assert anon_client.get("/api/blog-posts").json()["total"] == 2
    assert anon_client.get("/api/blog-posts/slug/live").json()["id"] == live["id"]
    assert anon_client.get(f"/api/blog-posts/{draft['id']}").json()["slug"] == "draft"
    assert anon_client.get("/api/blog-posts/slug/missing").status_code == 404


def test_publish_toggle(admin_client):
    post = create_post(admin_client)
    assert post["publishedAt"] is None

    published = admin_client.patch(f"/api/blog-posts/{post['id']}", json={"isPublished": True}).json()
    assert published["publishedAt"] is not None

    unpublished = admin_client.patch(f"/api/blog-posts/{post['id']}", json={"isPublished": False}).json()
    assert unpublished["publishedAt"] is None


def test_blog_writes_require_admin(client, anon_client, admin_client):
    post = create_post(admin_client)
    payload = {"title": "x", "slug": "x", "content": "x", "excerpt": "x"}

    assert anon_client.post("/api/blog-posts", json=payload).status_code == 401
    assert client.post("/api/blog-posts", json=payload).status_code == 403
    assert client.delete(f"/api/blog-posts/{post['id']}").status_code == 403
    assert admin_client.delete(f"/api/blog-posts/{post['id']}").status_code == 200


def test_content_pages(admin_client, anon_client, client):
    response = admin_client.post("/api/content-pages", json={
        "title": "About", "slug": "about", "content": "<h1>About</h1>",
    })
    assert response.status_code == 201
    page = response.json()
    assert page["isPublished"] is True

    admin_client.post("/api/content-pages", json={
        "title": "Hidden", "slug": "hidden", "content": "x", "isPublished": False,
    })

    assert [p["slug"] for p in anon_client.get("/api/content-pages", params={"published": "true"}).json()] == ["about"]
    assert anon_client.get("/api/content-pages/slug/about").json()["id"] == page["id"]

    assert client.patch(f"/api/content-pages/{page['id']}", json={"title": "x"}).status_code == 403
    response = admin_client.patch(f"/api/content-pages/{page['id']}", json={"slug": "hidden"})
    assert response.status_code == 409

    assert admin_client.delete(f"/api/content-pages/{page['id']}").status_code == 200
    assert anon_client.get(f"/api/content-pages/{page['id']}").status_code == 404


def test_email_templates_admin_only(client, anon_client, admin_client):
    assert anon_client.get("/api/email-templates").status_code == 401
    assert client.get("/api/email-templates").status_code == 403

    response = admin_client.post("/api/email-templates", json={
        "name": "welcome", "subject": "Welcome", "content": "Hello {{username}}",
    })
    assert response.status_code == 201
    template = response.json()

    assert admin_client.post("/api/email-templates", json={
        "name": "welcome", "subject": "x", "content": "x",
    }).status_code == 409

    updated = admin_client.patch(f"/api/email-templates/{template['id']}", json={"subject": "Hi"}).json()
    assert updated["subject"] == "Hi"
    assert updated["content"] == "Hello {{username}}"

    assert [t["name"] for t in admin_client.get("/api/email-templates").json()] == ["welcome"]
    assert admin_client.delete(f"/api/email-templates/{template['id']}").status_code == 200
    assert admin_client.get(f"/api/email-templates/{template['id']}").status_code == 404


def test_patch_null_clears_featured_image(admin_client):
    post = create_post(admin_client, featuredImage="https://images.example.com/cover.png")
    assert post["featuredImage"] == "https://images.example.com/cover.png"

    body = admin_client.patch(f"/api/blog-posts/{post['id']}", json={"featuredImage": None, "title": None}).json()
    assert body["featuredImage"] is None
    assert body["title"] == "Launch"
