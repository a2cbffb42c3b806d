"""Test fixtures for elmapi tests.

This module provides a reference API covering every kind of path segment,
query parameter, body and response, together with the Elm source expected
for each of its endpoints.
"""

from elmapi.codegen.types import (
    BOOL,
    INT,
    NO_CONTENT,
    STRING,
    Arg,
    Capture,
    Endpoint,
    QueryArg,
    QueryArgKind,
    Static,
    list_of,
    maybe,
    ref,
)

BOOK = ref('Book')

GET_ONE = Endpoint(
    function_name='getOne',
    method='GET',
    path=(Static('one'),),
    return_type=INT,
)

POST_TWO = Endpoint(
    function_name='postTwo',
    method='POST',
    path=(Static('two'),),
    body=STRING,
    return_type=maybe(INT),
)

GET_BOOKS_BY_ID = Endpoint(
    function_name='getBooksById',
    method='GET',
    path=(Static('books'), Capture(Arg('id', INT))),
    return_type=BOOK,
)

GET_BOOKS_BY_TITLE = Endpoint(
    function_name='getBooksByTitle',
    method='GET',
    path=(Static('books'), Capture(Arg('title', STRING))),
    return_type=BOOK,
)

GET_BOOKS = Endpoint(
    function_name='getBooks',
    method='GET',
    path=(Static('books'),),
    query=(
        QueryArg(Arg('published', BOOL), QueryArgKind.FLAG),
        QueryArg(Arg('sort', STRING), QueryArgKind.NORMAL),
        QueryArg(Arg('year', INT), QueryArgKind.NORMAL),
        QueryArg(Arg('filters', list_of(maybe(BOOL))), QueryArgKind.LIST),
    ),
    return_type=list_of(BOOK),
)

POST_BOOKS = Endpoint(
    function_name='postBooks',
    method='POST',
    path=(Static('books'),),
    body=BOOK,
    return_type=NO_CONTENT,
)

GET_NOTHING = Endpoint(
    function_name='getNothing',
    method='GET',
    path=(Static('nothing'),),
    return_type=NO_CONTENT,
)

TEST_API = [
    GET_ONE,
    POST_TWO,
    GET_BOOKS_BY_ID,
    GET_BOOKS_BY_TITLE,
    GET_BOOKS,
    POST_BOOKS,
    GET_NOTHING,
]

# The same API as a routes document
TEST_ROUTES_DOCUMENT = {
    'module': 'Generated.BooksApi',
    'routes': [
        {'method': 'GET', 'path': '/one', 'response': 'Int'},
        {'method': 'POST', 'path': '/two', 'body': 'String', 'response': 'Maybe Int'},
        {'method': 'GET', 'path': '/books/{id:Int}', 'response': 'Book'},
        {'method': 'GET', 'path': '/books/{title:String}', 'response': 'Book'},
        {
            'method': 'GET',
            'path': '/books',
            'query': [
                {'name': 'published', 'kind': 'flag'},
                {'name': 'sort', 'type': 'String'},
                {'name': 'year', 'type': 'Int'},
                {'name': 'filters', 'type': 'Maybe Bool', 'kind': 'list'},
            ],
            'response': 'List Book',
        },
        {'method': 'POST', 'path': '/books', 'body': 'Book', 'response': 'NoContent'},
        {'method': 'GET', 'path': '/nothing', 'response': 'NoContent'},
    ],
}

TEST_ROUTES_YAML = """\
module: Generated.BooksApi
routes:
  - method: GET
    path: /one
    response: Int
  - method: POST
    path: /two
    body: String
    response: Maybe Int
  - method: GET
    path: /books/{id:Int}
    response: Book
  - method: GET
    path: /books/{title:String}
    response: Book
  - method: GET
    path: /books
    query:
      - {name: published, kind: flag}
      - {name: sort, type: String}
      - {name: year, type: Int}
      - {name: filters, type: Maybe Bool, kind: list}
    response: List Book
  - method: POST
    path: /books
    body: Book
    response: NoContent
  - method: GET
    path: /nothing
    response: NoContent
"""

GET_ONE_SOURCE = r'''getOne : Task.Task Http.Error (Int)
getOne =
  let
    request =
      { verb =
          "GET"
      , headers =
          [("Content-Type", "application/json")]
      , url =
          "/" ++ "one"
      , body =
          Http.empty
      }
  in
    Http.fromJson
      int
      (Http.send Http.defaultSettings request)'''

POST_TWO_SOURCE = r'''postTwo : String -> Task.Task Http.Error (Maybe (Int))
postTwo body =
  let
    request =
      { verb =
          "POST"
      , headers =
          [("Content-Type", "application/json")]
      , url =
          "/" ++ "two"
      , body =
          Http.string (Json.Encode.encode 0 (Json.Encode.string body))
      }
  in
    Http.fromJson
      (maybe int)
      (Http.send Http.defaultSettings request)'''

GET_BOOKS_BY_ID_SOURCE = r'''getBooksById : Int -> Task.Task Http.Error (Book)
getBooksById id =
  let
    request =
      { verb =
          "GET"
      , headers =
          [("Content-Type", "application/json")]
      , url =
          "/" ++ "books"
          ++ "/" ++ (id |> toString |> Http.uriEncode)
      , body =
          Http.empty
      }
  in
    Http.fromJson
      decodeBook
      (Http.send Http.defaultSettings request)'''

GET_BOOKS_BY_TITLE_SOURCE = r'''getBooksByTitle : String -> Task.Task Http.Error (Book)
getBooksByTitle title =
  let
    request =
      { verb =
          "GET"
      , headers =
          [("Content-Type", "application/json")]
      , url =
          "/" ++ "books"
          ++ "/" ++ (title |> Http.uriEncode)
      , body =
          Http.empty
      }
  in
    Http.fromJson
      decodeBook
      (Http.send Http.defaultSettings request)'''

GET_BOOKS_SOURCE = r'''getBooks : Bool -> Maybe (String) -> Maybe (Int) -> List (Maybe (Bool)) -> Task.Task Http.Error (List (Book))
getBooks published sort year filters =
  let
    params =
      List.filter (not << String.isEmpty)
        [ if published then
            "published="
          else
            ""
        , sort
            |> Maybe.map (Http.uriEncode >> (++) "sort=")
            |> Maybe.withDefault ""
        , year
            |> Maybe.map (toString >> Http.uriEncode >> (++) "year=")
            |> Maybe.withDefault ""
        , filters
            |> List.map (\val -> "filters[]=" ++ (val |> toString |> Http.uriEncode))
            |> String.join "&"
        ]
    request =
      { verb =
          "GET"
      , headers =
          [("Content-Type", "application/json")]
      , url =
          "/" ++ "books"
          ++ if List.isEmpty params then
               ""
             else
               "?" ++ String.join "&" params
      , body =
          Http.empty
      }
  in
    Http.fromJson
      (list decodeBook)
      (Http.send Http.defaultSettings request)'''

EMPTY_RESPONSE_HANDLER_SOURCE = r'''emptyResponseHandler : a -> String -> Task.Task Http.Error a
emptyResponseHandler x str =
  if String.isEmpty str then
    Task.succeed x
  else
    Task.fail (Http.UnexpectedPayload str)'''

HANDLE_RESPONSE_SOURCE = r'''handleResponse : (String -> Task.Task Http.Error a) -> Http.Response -> Task.Task Http.Error a
handleResponse handle response =
  if 200 <= response.status && response.status < 300 then
    case response.value of
      Http.Text str ->
        handle str
      _ ->
        Task.fail (Http.UnexpectedPayload "Response body is a blob, expecting a string.")
  else
    Task.fail (Http.BadResponse response.status response.statusText)'''

PROMOTE_ERROR_SOURCE = r'''promoteError : Http.RawError -> Http.Error
promoteError rawError =
  case rawError of
    Http.RawTimeout -> Http.Timeout
    Http.RawNetworkError -> Http.NetworkError'''

POST_BOOKS_SOURCE = r'''postBooks : Book -> Task.Task Http.Error (NoContent)
postBooks body =
  let
    request =
      { verb =
          "POST"
      , headers =
          [("Content-Type", "application/json")]
      , url =
          "/" ++ "books"
      , body =
          Http.string (Json.Encode.encode 0 (encodeBook body))
      }
  in
    Task.mapError promoteError
      (Http.send Http.defaultSettings request)
        `Task.andThen`
          handleResponse (emptyResponseHandler NoContent)'''

GET_NOTHING_SOURCE = r'''getNothing : Task.Task Http.Error (NoContent)
getNothing =
  let
    request =
      { verb =
          "GET"
      , headers =
          [("Content-Type", "application/json")]
      , url =
          "/" ++ "nothing"
      , body =
          Http.empty
      }
  in
    Task.mapError promoteError
      (Http.send Http.defaultSettings request)
        `Task.andThen`
          handleResponse (emptyResponseHandler NoContent)'''

# Declarations expected from generating TEST_API, in order
EXPECTED_TEST_API_SOURCES = [
    GET_ONE_SOURCE,
    POST_TWO_SOURCE,
    GET_BOOKS_BY_ID_SOURCE,
    GET_BOOKS_BY_TITLE_SOURCE,
    GET_BOOKS_SOURCE,
    EMPTY_RESPONSE_HANDLER_SOURCE,
    HANDLE_RESPONSE_SOURCE,
    PROMOTE_ERROR_SOURCE,
    POST_BOOKS_SOURCE,
    GET_NOTHING_SOURCE,
]
