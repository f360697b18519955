"""GraphQL schema definition.

Root query fields: authors, author(id), articles, article(id).
Root mutation fields: deleteAuthor(id), updateAuthor(author),
createArticle(article). Every mutation returns the updated collection.

The Author type has no password field; hashes never leave the store.
"""

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from . import resolvers

author_type = GraphQLObjectType(
    "Author",
    lambda: {
        "id": GraphQLField(GraphQLString),
        "firstName": GraphQLField(GraphQLString),
        "lastName": GraphQLField(GraphQLString),
        "userName": GraphQLField(GraphQLString),
        "articles": GraphQLField(
            GraphQLList(article_type),
            resolve=resolvers.resolve_author_articles,
            description="Articles whose author reference is this author",
        ),
    },
)

article_type = GraphQLObjectType(
    "Article",
    lambda: {
        "id": GraphQLField(GraphQLString),
        "author": GraphQLField(GraphQLString, description="ID of the author"),
        "title": GraphQLField(GraphQLString),
        "content": GraphQLField(GraphQLString),
        "writer": GraphQLField(
            author_type,
            resolve=resolvers.resolve_article_writer,
            description="The referenced author, or null if it no longer exists",
        ),
    },
)

author_input_type = GraphQLInputObjectType(
    "AuthorInput",
    {
        "id": GraphQLInputField(GraphQLString),
        "firstName": GraphQLInputField(GraphQLString),
        "lastName": GraphQLInputField(GraphQLString),
        "userName": GraphQLInputField(GraphQLString),
        "password": GraphQLInputField(GraphQLString),
    },
)

article_input_type = GraphQLInputObjectType(
    "ArticleInput",
    {
        "id": GraphQLInputField(GraphQLString),
        "author": GraphQLInputField(GraphQLString),
        "title": GraphQLInputField(GraphQLString),
        "content": GraphQLInputField(GraphQLString),
    },
)

_id_arg = {"id": GraphQLArgument(GraphQLNonNull(GraphQLString))}

query_type = GraphQLObjectType(
    "Query",
    {
        "authors": GraphQLField(GraphQLList(author_type), resolve=resolvers.resolve_authors),
        "author": GraphQLField(author_type, args=_id_arg, resolve=resolvers.resolve_author),
        "articles": GraphQLField(GraphQLList(article_type), resolve=resolvers.resolve_articles),
        "article": GraphQLField(article_type, args=_id_arg, resolve=resolvers.resolve_article),
    },
)

mutation_type = GraphQLObjectType(
    "Mutation",
    {
        "deleteAuthor": GraphQLField(
            GraphQLList(author_type),
            args=_id_arg,
            resolve=resolvers.resolve_delete_author,
        ),
        "updateAuthor": GraphQLField(
            GraphQLList(author_type),
            args={"author": GraphQLArgument(author_input_type)},
            resolve=resolvers.resolve_update_author,
        ),
        "createArticle": GraphQLField(
            GraphQLList(article_type),
            args={"article": GraphQLArgument(article_input_type)},
            resolve=resolvers.resolve_create_article,
        ),
    },
)

schema = GraphQLSchema(query=query_type, mutation=mutation_type)
